"""
Multi-source parsing for the IP Ranges system.

Sources are named, lazily opened byte streams. ``parse_all`` walks them in
order and yields one group per well-formed document, skipping documents whose
markup is malformed. Every other error propagates to the caller.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Iterator, Optional

from lxml import etree

from ipranges.core.constants import SOURCE_PATTERN, SOURCE_SUFFIX
from ipranges.core.exceptions import SourceError
from ipranges.model import Group
from ipranges.xml.parser import DocumentParser

logger = logging.getLogger(__name__)


class Source:
    """
    A named byte stream that is opened only when it is parsed.
    """

    def __init__(self, name: str, opener: Callable[[], BinaryIO]):
        """
        Initialize the source.

        Args:
            name: Source name, used for prefix and suffix filtering
            opener: Callable returning a new binary stream on each call
        """
        self.name = name
        self.opener = opener

    def open(self) -> BinaryIO:
        return self.opener()

    @classmethod
    def from_path(cls, path, name: Optional[str] = None) -> 'Source':
        """Create a source reading a file on disk."""
        path = Path(path)
        return cls(name or path.name, lambda: path.open("rb"))

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> 'Source':
        """Create a source over an in-memory document."""
        return cls(name, lambda: io.BytesIO(data))

    def __repr__(self) -> str:
        return f"Source({self.name!r})"


def sources_from_directory(directory_path: str, file_pattern: str = SOURCE_PATTERN) -> Iterator[Source]:
    """
    Find source documents below a directory.

    Sources are named by their path relative to the directory using ``/``
    separators and are produced in sorted order.

    Raises:
        SourceError: If the directory does not exist
    """
    root = Path(directory_path)
    if not root.is_dir():
        raise SourceError(f"Directory not found: {directory_path}")

    for path in sorted(root.glob(f"**/{file_pattern}")):
        if path.is_file():
            yield Source.from_path(path, name=path.relative_to(root).as_posix())


def parse_all(sources: Iterable[Source], name_prefix: Optional[str] = None,
              suffix: Optional[str] = SOURCE_SUFFIX) -> Iterator[Group]:
    """
    Parse each source in turn, yielding the groups one at a time.

    Args:
        sources: Sources to parse, in order
        name_prefix: Only parse sources whose name starts with this prefix
        suffix: Only parse sources whose name ends with this suffix (None for all)

    Yields:
        One group per well-formed source document
    """
    parser = DocumentParser()

    for source in sources:
        if name_prefix and not source.name.startswith(name_prefix):
            continue
        if suffix and not source.name.endswith(suffix):
            continue

        try:
            with source.open() as stream:
                group = parser.parse(stream)
        except etree.XMLSyntaxError as e:
            logger.warning(f"Skipping malformed source {source.name}: {e}")
            continue

        if group is None:
            logger.debug(f"Source {source.name} holds no group")
            continue

        logger.debug(f"Parsed group '{group.name}' from {source.name}")
        yield group


def parse_directory(directory_path: str, name_prefix: Optional[str] = None) -> Iterator[Group]:
    """Parse every ranges document found below a directory."""
    return parse_all(sources_from_directory(directory_path), name_prefix=name_prefix)
