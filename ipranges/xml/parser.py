"""
Ranges document parser for the IP Ranges system.

This module provides the depth-tracked state machine that validates the
structure of a ranges document while building its Group -> Region ->
AddressRange model from a single forward pass over the element tokens.

Document layout::

    <group name="...">
      <region name="..." description="...">
        <range network="10.0.0.0/24"/>
        <range from="10.0.1.0" to="10.0.1.9"/>
      </region>
    </group>

Element and attribute names are matched case-insensitively. Unknown elements
and attributes are ignored.
"""

import io
import logging
from contextlib import closing
from typing import BinaryIO, List, Optional, Tuple, Union

from ipranges.core.constants import (
    DESCRIPTION_ATTR, FROM_ATTR, GROUP_DEPTH, GROUP_ELEMENT, NAME_ATTR, NETWORK_ATTR,
    RANGE_DEPTH, RANGE_ELEMENT, REGION_DEPTH, REGION_ELEMENT, TO_ATTR
)
from ipranges.core.exceptions import ConsistencyError, RangeFormatError, StructuralError
from ipranges.model import AddressRange, Group, Region, parse_address
from ipranges.model.address_range import Address
from ipranges.xml.streaming import END, Token, XMLTokenStream

logger = logging.getLogger(__name__)

Attributes = List[Tuple[str, str]]


class DocumentParser:
    """
    Parser for ranges documents.

    Each call to ``parse`` keeps its own state, so one parser may be reused
    for any number of documents and independent parsers may run concurrently.
    """

    def parse(self, stream: BinaryIO, encoding: Optional[str] = None) -> Optional[Group]:
        """
        Parse one ranges document.

        Reading stops as soon as the root element closes. If the tokenizer
        runs out of input before that, the group built so far is returned.

        Args:
            stream: Binary stream holding the document
            encoding: Overrides the encoding named in the XML declaration

        Returns:
            The parsed group

        Raises:
            StructuralError: If the root element or a required attribute is wrong or missing
            RangeFormatError: If an address or network value cannot be parsed
            ConsistencyError: If from/to disagree with the network attribute
            lxml.etree.XMLSyntaxError: If the markup itself is malformed
        """
        group = None
        region = None
        depth = 0

        for token in XMLTokenStream(stream, encoding=encoding):
            if token.kind == END:
                depth -= 1
                if depth == 0:
                    logger.debug(f"Parsed group '{group.name}' with {len(group.regions)} regions")
                    return group
                continue

            depth += 1
            if depth == GROUP_DEPTH:
                if token.name != GROUP_ELEMENT:
                    raise StructuralError(
                        f"Invalid root element ('{token.name}') at line {token.line}, expecting '{GROUP_ELEMENT}'"
                    )
                group = self._read_group(token.attributes)

            elif depth == REGION_DEPTH and token.name == REGION_ELEMENT:
                if group is None:
                    raise StructuralError("Missing appropriate root element")
                region = group._add_region(self._read_region(token.attributes))

            elif depth == RANGE_DEPTH and token.name == RANGE_ELEMENT:
                if group is None:
                    raise StructuralError(f"Missing '{GROUP_ELEMENT}' element")
                if region is None:
                    raise StructuralError(f"Missing '{REGION_ELEMENT}' element for range at line {token.line}")
                region._add_range(self._read_range(token))

        return group

    def _read_group(self, attributes: Attributes) -> Group:
        name = None
        for attr_name, value in attributes:
            if attr_name == NAME_ATTR:
                name = value
        return Group(name)

    def _read_region(self, attributes: Attributes) -> Region:
        name = None
        description = None
        for attr_name, value in attributes:
            if attr_name == NAME_ATTR:
                name = value
            elif attr_name == DESCRIPTION_ATTR:
                description = value
        return Region(name, description)

    def _read_range(self, token: Token) -> AddressRange:
        """
        Resolve a range element's attributes into an AddressRange.

        ``network`` is authoritative when present; ``from`` and ``to`` are
        then only checked against the calculated boundaries. Without
        ``network`` both ``from`` and ``to`` are required. Empty values count
        as absent.
        """
        values = {NETWORK_ATTR: None, FROM_ATTR: None, TO_ATTR: None}
        for name, value in token.attributes:
            if name in values:
                values[name] = value.strip()

        address_range = None
        if values[NETWORK_ATTR]:
            address_range = AddressRange.parse(values[NETWORK_ATTR])

        from_ip = self._read_boundary(FROM_ATTR, values[FROM_ATTR], address_range)
        to_ip = self._read_boundary(TO_ATTR, values[TO_ATTR], address_range)

        if address_range is None:
            if from_ip is None:
                raise StructuralError(
                    f"Missing '{FROM_ATTR}' or '{NETWORK_ATTR}' attribute for range at line {token.line}"
                )
            if to_ip is None:
                raise StructuralError(
                    f"Missing '{TO_ATTR}' or '{NETWORK_ATTR}' attribute for range at line {token.line}"
                )
            # Boundary order is not checked, inverted ranges are kept as written
            address_range = AddressRange(from_ip, to_ip)

        return address_range

    def _read_boundary(self, attribute: str, text: Optional[str],
                       address_range: Optional[AddressRange]) -> Optional[Address]:
        if not text:
            return None

        try:
            address = parse_address(text)
        except RangeFormatError as e:
            raise RangeFormatError(f"An invalid {attribute} IP address was specified ('{text}').") from e

        if address_range is not None:
            calculated = address_range.from_ip if attribute == FROM_ATTR else address_range.to_ip
            if address != calculated:
                raise ConsistencyError(attribute, address, calculated)
        return address


def parse_document(stream: BinaryIO, encoding: Optional[str] = None) -> Optional[Group]:
    """
    Parse a ranges document from a binary stream.

    The stream is closed when parsing finishes, whether it succeeds or fails.
    """
    with closing(stream):
        return DocumentParser().parse(stream, encoding=encoding)


def parse_string(xml: Union[str, bytes]) -> Optional[Group]:
    """
    Parse a ranges document held in memory.

    Text is decoded already, so any encoding named in its XML declaration is
    ignored. Bytes are decoded as the declaration says.
    """
    if xml is None:
        raise ValueError("xml must not be None")
    if isinstance(xml, str):
        return parse_document(io.BytesIO(xml.encode("utf-8")), encoding="utf-8")
    return parse_document(io.BytesIO(xml))


def parse_file(file_path: str) -> Optional[Group]:
    """Parse a ranges document from a file on disk."""
    with open(file_path, "rb") as f:
        return DocumentParser().parse(f)
