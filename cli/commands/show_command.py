"""
Show command implementation for the IP Ranges CLI.
"""

import json
import logging

import yaml

from ipranges.xml.parser import parse_file

logger = logging.getLogger(__name__)

def show_document(file_path: str, output_format: str = 'json') -> str:
    """
    Parse one ranges document and print its model.

    Args:
        file_path: Path to the ranges document
        output_format: 'json' or 'yaml'

    Returns:
        The rendered model
    """
    group = parse_file(file_path)
    data = group.to_dict() if group is not None else None

    if output_format == 'yaml':
        rendered = yaml.safe_dump(data, sort_keys=False)
    else:
        rendered = json.dumps(data, indent=2)

    print(rendered)
    return rendered
