"""
Check command implementation for the IP Ranges CLI.
"""

import logging
from typing import Dict, List, Optional

from ipranges.sources import parse_directory

logger = logging.getLogger(__name__)

def check_sources(directory_path: str, name_prefix: Optional[str] = None) -> List[Dict[str, object]]:
    """
    Parse every ranges document in a directory and report what was found.

    Malformed documents are skipped; any other error aborts the check.

    Args:
        directory_path: Directory containing ranges documents
        name_prefix: Optional prefix the relative document name must start with

    Returns:
        One summary per parsed group
    """
    summaries = []
    for group in parse_directory(directory_path, name_prefix=name_prefix):
        summary = {
            "name": group.name,
            "regions": len(group.regions),
            "ranges": group.range_count()
        }
        summaries.append(summary)
        print(f"{group.name}: {summary['regions']} regions, {summary['ranges']} ranges")

    logger.info(f"Found {len(summaries)} groups in {directory_path}")
    return summaries
