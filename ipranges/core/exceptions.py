"""
Custom exceptions for the IP Ranges system.

Malformed markup is not wrapped: it surfaces as ``lxml.etree.XMLSyntaxError``
so that multi-source parsing can skip such documents while every other error
kind still reaches the caller.
"""

class IPRangesError(Exception):
    """Base class for all IP Ranges exceptions."""
    pass

class ConfigurationError(IPRangesError):
    """Raised when there's a configuration issue."""
    pass

class StructuralError(IPRangesError):
    """Raised when a document has the wrong shape (root, nesting, required attributes)."""
    pass

class RangeFormatError(IPRangesError, ValueError):
    """Raised when an address, CIDR block or prefix length cannot be parsed."""
    pass

class ConsistencyError(IPRangesError):
    """
    Raised when an explicitly supplied range boundary disagrees with the
    boundary calculated from the network attribute.
    """

    def __init__(self, attribute: str, supplied, calculated):
        self.attribute = attribute
        self.supplied = supplied
        self.calculated = calculated
        super().__init__(
            f"'{attribute}' IP in range does not match calculated value, "
            f"data seems to be inconsistent ({supplied} != {calculated})"
        )

class SourceError(IPRangesError):
    """Raised when a source location cannot be enumerated."""
    pass
