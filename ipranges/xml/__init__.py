"""XML processing module for IP Ranges.

This module provides tools for reading and writing ranges documents.
"""

from .parser import DocumentParser, parse_document, parse_file, parse_string
from .streaming import XMLTokenStream
from .writer import write_group, write_group_file

__all__ = ['DocumentParser', 'parse_document', 'parse_file', 'parse_string',
           'XMLTokenStream', 'write_group', 'write_group_file']
