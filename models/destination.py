from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from core.profile import UserProfile
from core.trait_vector import TraitVector

"""
Destination-side records and result containers.
No scoring logic lives here.
"""


def _require_id(row: Mapping, key: str = "id") -> int:
    value = row.get(key)
    if type(value) is not int:
        raise ValueError(f"Row is missing an integer {key}: {row!r}")
    return value


def _optional_text(row: Mapping, key: str) -> Optional[str]:
    value = row.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"{key} must be a string: {value!r}")


@dataclass(frozen=True)
class Destination:
    """A province the quiz can recommend."""

    id: int
    name_th: Optional[str]
    name_en: Optional[str]
    traits: TraitVector = field(default_factory=TraitVector, compare=False)
    region_id: Optional[int] = None

    @classmethod
    def from_record(cls, row: Mapping) -> "Destination":
        if not isinstance(row, Mapping):
            raise ValueError(f"Destination row must be a mapping: {row!r}")

        return cls(
            id=_require_id(row),
            name_th=_optional_text(row, "name_th"),
            name_en=_optional_text(row, "name_en"),
            traits=TraitVector.from_record(row),
            region_id=row.get("region_id"),
        )

    def to_dict(self) -> Dict[str, object]:
        return {"id": self.id, "name_th": self.name_th, "name_en": self.name_en}


@dataclass(frozen=True)
class Attraction:
    """A point of interest inside a destination, tagged with trait-like categories."""

    id: int
    destination_id: int
    name_th: Optional[str]
    name_en: Optional[str]
    description: Optional[str] = None
    categories: Tuple[str, ...] = ()

    @classmethod
    def from_record(cls, row: Mapping) -> "Attraction":
        if not isinstance(row, Mapping):
            raise ValueError(f"Attraction row must be a mapping: {row!r}")

        raw_categories = row.get("categories") or []
        if isinstance(raw_categories, str) or not isinstance(raw_categories, (list, tuple)):
            raise ValueError(f"categories must be a list: {raw_categories!r}")

        return cls(
            id=_require_id(row),
            destination_id=_require_id(row, "province_id"),
            name_th=_optional_text(row, "name_th"),
            name_en=_optional_text(row, "name_en"),
            description=_optional_text(row, "description"),
            categories=tuple(str(c).strip().lower() for c in raw_categories),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name_th": self.name_th,
            "name_en": self.name_en,
            "description": self.description,
        }


@dataclass(frozen=True)
class RankedDestination:
    destination: Destination
    score: float


@dataclass(frozen=True)
class DestinationResult:
    destination: Destination
    score: float
    attractions: Tuple[Attraction, ...] = ()


@dataclass(frozen=True)
class RecommendationResult:
    """
    Everything one quiz attempt produces: the profile and the ranked
    destinations, each with its picked attractions.
    """

    profile: UserProfile
    destinations: Tuple[DestinationResult, ...] = ()

    def to_snapshot(self) -> Dict[str, List[Dict[str, object]]]:
        """Denormalised shape stored per attempt and read back by history views."""
        return {
            "recommended_provinces": [item.destination.to_dict() for item in self.destinations],
            "recommended_locations": [
                attraction.to_dict()
                for item in self.destinations
                for attraction in item.attractions
            ],
        }
