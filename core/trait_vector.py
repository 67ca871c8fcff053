import math
from types import MappingProxyType
from typing import Dict, Mapping, Optional


# Fixed priority order. Ties between traits always resolve in this order.
TRAIT_TYPES = (
    "nature",
    "cafe",
    "adventure",
    "culture",
    "sea",
)


def _check_weight(trait, value) -> float:
    if value is None:
        return 0.0

    # bool is an int subclass, but True is not a weight
    if type(value) not in [int, float]:
        raise ValueError(f"Weight for {trait} must be numeric: {value!r}")

    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"Weight for {trait} must be finite: {value}")
    if value < 0:
        raise ValueError(f"Weight for {trait} must be non-negative: {value}")

    return value


class TraitVector:
    """
    A complete weight assignment over the five travel traits.

    Used for a single quiz option, a destination's trait scores and the
    aggregated user profile. All five keys are always present; missing
    input keys default to 0.0 and unknown keys are rejected. Immutable once
    built: `scores` is a read-only view.
    """

    TRAIT_TYPES = TRAIT_TYPES

    __slots__ = ("_scores",)

    def __init__(self, scores: Optional[Mapping[str, float]] = None):
        values: Dict[str, float] = {trait: 0.0 for trait in self.TRAIT_TYPES}

        if scores:
            for trait, value in scores.items():
                if trait not in values:
                    raise ValueError(f"Invalid trait: {trait}")
                values[trait] = _check_weight(trait, value)

        object.__setattr__(self, "_scores", MappingProxyType(values))

    @property
    def scores(self) -> Mapping[str, float]:
        return self._scores

    @classmethod
    def from_record(cls, record: Mapping, suffix: str = "_score") -> "TraitVector":
        """
        Read a store row such as ``{"nature_score": 3, "sea_score": None}``.
        Columns that are absent or null count as 0.
        """
        if not isinstance(record, Mapping):
            raise ValueError(f"Expected a mapping, got {type(record).__name__}")

        return cls({trait: record.get(f"{trait}{suffix}") for trait in TRAIT_TYPES})

    @classmethod
    def coerce(cls, value) -> "TraitVector":
        if isinstance(value, TraitVector):
            return value
        if isinstance(value, Mapping):
            return cls(value)
        raise ValueError(f"Cannot build a trait vector from {type(value).__name__}")

    def get(self, trait) -> float:
        if trait not in self.scores:
            raise ValueError(f"Invalid trait: {trait}")
        return self.scores[trait]

    def total(self) -> float:
        return math.fsum(self.scores[trait] for trait in TRAIT_TYPES)

    def normalised(self) -> "TraitVector":
        """L1 normalisation. A zero vector stays zero."""
        total = self.total()
        if total == 0:
            return TraitVector()

        return TraitVector({trait: self.scores[trait] / total for trait in TRAIT_TYPES})

    def is_zero(self) -> bool:
        return self.total() == 0

    def to_dict(self) -> Dict[str, float]:
        return {trait: self.scores[trait] for trait in TRAIT_TYPES}

    def __eq__(self, other):
        if not isinstance(other, TraitVector):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __setattr__(self, name, value):
        raise AttributeError("TraitVector is immutable")

    def __hash__(self):
        return hash(tuple(self._scores[t] for t in TRAIT_TYPES))

    def __repr__(self):
        inner = ", ".join(f"{t}={self.scores[t]:g}" for t in TRAIT_TYPES)
        return f"TraitVector({inner})"
