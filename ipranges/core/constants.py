"""
Core constants used throughout the IP Ranges system.
"""

# File system paths
SOURCES_DIR = "ranges"
CONFIG_DEFAULTS_DIR = "config/defaults"

# Source discovery
SOURCE_SUFFIX = ".xml"
SOURCE_PATTERN = "*.xml"
ENV_PREFIX = "IPRANGES_"

# Document structure (names are matched case-insensitively)
GROUP_ELEMENT = "group"
REGION_ELEMENT = "region"
RANGE_ELEMENT = "range"

GROUP_DEPTH = 1
REGION_DEPTH = 2
RANGE_DEPTH = 3

# Attributes
NAME_ATTR = "name"
DESCRIPTION_ATTR = "description"
NETWORK_ATTR = "network"
FROM_ATTR = "from"
TO_ATTR = "to"
