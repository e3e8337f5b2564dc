"""
Streaming XML tokenizer for memory-efficient document processing.

This module turns a byte stream into a forward-only sequence of element
open/close tokens without building the full document tree.
"""

import logging
from typing import BinaryIO, Iterator, List, NamedTuple, Optional, Tuple

from lxml import etree

logger = logging.getLogger(__name__)

START = "start"
END = "end"


class Token(NamedTuple):
    """
    A structural token read from the document.

    Attributes:
        kind: START or END
        name: Lower-cased local element name
        attributes: (lower-cased local name, value) pairs in document order;
            empty for END tokens
        line: Source line of the element, when known
    """

    kind: str
    name: str
    attributes: List[Tuple[str, str]]
    line: Optional[int]


def local_name(tag: str) -> str:
    """Return the lower-cased tag or attribute name without its namespace."""
    return etree.QName(tag).localname.lower()


class XMLTokenStream:
    """
    A forward-only token reader over an XML byte stream.

    lxml reports a self-closing element as a START token immediately followed
    by its END token, so every START is balanced by exactly one END. Comments,
    processing instructions and text are never reported. Malformed markup
    raises ``lxml.etree.XMLSyntaxError`` from the iteration.
    """

    def __init__(self, stream: BinaryIO, encoding: Optional[str] = None):
        """
        Initialize the reader.

        Args:
            stream: Binary file-like object positioned at the document start
            encoding: Encoding to decode with, overriding the XML declaration
        """
        self.stream = stream
        self.encoding = encoding

    def __iter__(self) -> Iterator[Token]:
        context = etree.iterparse(
            self.stream,
            events=(START, END),
            remove_comments=True,
            remove_pis=True,
            resolve_entities=False,
            no_network=True,
            encoding=self.encoding,
        )

        for event, element in context:
            if event == START:
                attributes = [(local_name(key), value) for key, value in element.attrib.items()]
                yield Token(START, local_name(element.tag), attributes, element.sourceline)
                continue

            yield Token(END, local_name(element.tag), [], element.sourceline)

            # Attributes were consumed on START, drop the finished subtree
            element.clear(keep_tail=True)
            parent = element.getparent()
            if parent is not None:
                while element.getprevious() is not None:
                    del parent[0]
