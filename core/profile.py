from dataclasses import dataclass, field
from typing import Dict, List, Optional

from core.trait_vector import TRAIT_TYPES, TraitVector


@dataclass(frozen=True)
class UserProfile:
    """
    The user's aggregated travel preferences for one quiz attempt.

    `traits` holds the L1 normalised weights used for matching, `raw` keeps
    the accumulated option totals so they can be stored alongside the result.
    Built once by the aggregator and never mutated afterwards.
    """

    traits: TraitVector = field(default_factory=TraitVector)
    raw: TraitVector = field(default_factory=TraitVector)
    answer_count: int = 0

    def weight(self, trait: str) -> float:
        return self.traits.get(trait)

    def top_traits(self, n: Optional[int] = None) -> List[str]:
        """Traits by descending weight, ties in trait order."""
        # sorted() is stable, so equal weights keep TRAIT_TYPES order
        ordered = sorted(TRAIT_TYPES, key=lambda t: -self.traits.scores[t])
        if n is None:
            return ordered
        return ordered[:max(n, 0)]

    def top_trait(self) -> Optional[str]:
        if self.traits.is_zero():
            return None
        return self.top_traits(1)[0]

    def to_dict(self) -> Dict[str, object]:
        return {
            "traits": self.traits.to_dict(),
            "raw": self.raw.to_dict(),
            "answer_count": self.answer_count,
        }
