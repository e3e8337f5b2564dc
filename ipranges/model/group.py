"""
Group and region models.

A ``Group`` owns its regions and each ``Region`` owns its ranges, both in
document order. ``Region.group`` points back at the owning group for
navigation only and takes no part in equality.
"""

from typing import Any, Dict, List, Optional, Tuple

from ipranges.core.exceptions import StructuralError
from ipranges.model.address_range import AddressRange


class Region:
    """
    A named region holding an ordered sequence of address ranges.
    """

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None):
        """
        Initialize a region.

        Args:
            name: Region name (surrounding whitespace is removed)
            description: Free-form description, kept verbatim
        """
        self._name = name.strip() if name is not None else None
        self._description = description
        self._ranges: List[AddressRange] = []
        self._group = None

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def ranges(self) -> Tuple[AddressRange, ...]:
        return tuple(self._ranges)

    @property
    def group(self) -> Optional['Group']:
        """The owning group (non-owning reference)."""
        return self._group

    def _add_range(self, address_range: AddressRange) -> None:
        self._ranges.append(address_range)

    def _attach(self, group: 'Group') -> None:
        if self._group is not None and self._group is not group:
            raise StructuralError(f"Region '{self.name}' already belongs to group '{self._group.name}'")
        self._group = group

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return (self.name, self.description, self._ranges) == (other.name, other.description, other._ranges)

    def __repr__(self) -> str:
        return f"Region(name={self.name!r}, ranges={len(self._ranges)})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "description": self.description,
            "ranges": [address_range.to_dict() for address_range in self._ranges]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Region':
        """Create from dictionary representation."""
        region = cls(name=data.get("name"), description=data.get("description"))
        for range_data in data.get("ranges", []):
            region._add_range(AddressRange.from_dict(range_data))
        return region


class Group:
    """
    The root of a ranges document: a name and an ordered sequence of regions.

    The name is stored verbatim, unlike region names which are trimmed.
    Regions are appended only while the group is being built, by the parser
    or by ``from_dict``.
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name
        self._regions: List[Region] = []

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def regions(self) -> Tuple[Region, ...]:
        return tuple(self._regions)

    def _add_region(self, region: Region) -> Region:
        """
        Attach a region to this group and append it to the region sequence.

        Raises:
            StructuralError: If the region already belongs to another group
        """
        region._attach(self)
        self._regions.append(region)
        return region

    def range_count(self) -> int:
        """Total number of ranges over all regions."""
        return sum(len(region.ranges) for region in self._regions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return (self.name, self._regions) == (other.name, other._regions)

    def __repr__(self) -> str:
        return f"Group(name={self.name!r}, regions={len(self._regions)})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "regions": [region.to_dict() for region in self._regions]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Group':
        """Create from dictionary representation."""
        group = cls(name=data.get("name"))
        for region_data in data.get("regions", []):
            group._add_region(Region.from_dict(region_data))
        return group
