"""
XML serialization of the Group -> Region -> AddressRange model.

Output follows the layout read by ``ipranges.xml.parser``. A range that
covers exactly one network block is written as ``network``, any other
range as ``from``/``to``.
"""

import logging

from lxml import etree

from ipranges.core.constants import (
    DESCRIPTION_ATTR, FROM_ATTR, GROUP_ELEMENT, NAME_ATTR, NETWORK_ATTR,
    RANGE_ELEMENT, REGION_ELEMENT, TO_ATTR
)
from ipranges.model import Group

logger = logging.getLogger(__name__)


def build_element(group: Group) -> etree._Element:
    """Build the ``group`` element tree for a group."""
    root = etree.Element(GROUP_ELEMENT)
    if group.name is not None:
        root.set(NAME_ATTR, group.name)

    for region in group.regions:
        region_elem = etree.SubElement(root, REGION_ELEMENT)
        if region.name is not None:
            region_elem.set(NAME_ATTR, region.name)
        if region.description is not None:
            region_elem.set(DESCRIPTION_ATTR, region.description)

        for address_range in region.ranges:
            range_elem = etree.SubElement(region_elem, RANGE_ELEMENT)
            network = address_range.network
            if network is not None:
                range_elem.set(NETWORK_ATTR, network)
            else:
                range_elem.set(FROM_ATTR, str(address_range.from_ip))
                range_elem.set(TO_ATTR, str(address_range.to_ip))

    return root


def write_group(group: Group) -> bytes:
    """Serialize a group to an UTF-8 encoded document."""
    return etree.tostring(build_element(group), xml_declaration=True, encoding="UTF-8", pretty_print=True)


def write_group_file(group: Group, file_path: str) -> None:
    """Serialize a group to a file."""
    with open(file_path, "wb") as f:
        f.write(write_group(group))
    logger.debug(f"Wrote group '{group.name}' to {file_path}")
