import math
from collections.abc import Mapping, Sequence
from typing import Dict, List, Union

from core.profile import UserProfile
from core.trait_vector import TRAIT_TYPES, TraitVector

OptionScore = Union[TraitVector, Mapping]


def aggregate_profile(option_scores: Sequence[OptionScore]) -> UserProfile:
    """
    Fold the trait vectors of the selected quiz options into a UserProfile.

    Weights are summed per trait, then L1 normalised so the five profile
    weights add up to 1. A zero total (no options, or options that score
    nothing) yields the zero profile instead of dividing by zero.

    fsum is exactly rounded, so the order of the options does not change
    the result.
    """
    if isinstance(option_scores, (str, bytes)) or not isinstance(option_scores, Sequence):
        raise ValueError(f"Option scores must be a sequence, got {type(option_scores).__name__}")

    vectors: List[TraitVector] = [TraitVector.coerce(o) for o in option_scores]

    totals: Dict[str, float] = {
        trait: math.fsum(v.scores[trait] for v in vectors)
        for trait in TRAIT_TYPES
    }
    raw = TraitVector(totals)

    return UserProfile(
        traits=raw.normalised(),
        raw=raw,
        answer_count=len(vectors),
    )


def convert_options_to_profile(option_rows: Sequence[Mapping]) -> UserProfile:
    """
    Build a profile straight from `quiz_options` rows (nature_score, cafe_score, ...).
    """
    if isinstance(option_rows, (str, bytes)) or not isinstance(option_rows, Sequence):
        raise ValueError(f"Option rows must be a sequence, got {type(option_rows).__name__}")

    return aggregate_profile([TraitVector.from_record(row) for row in option_rows])
