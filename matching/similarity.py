import math

from core.profile import UserProfile
from core.trait_vector import TRAIT_TYPES
from models.destination import Destination


def match_destination(
    profile: UserProfile,
    destination: Destination,
) -> float:
    """
    Destination fit.

    Rule:
    - Destination trait scores are L1 normalised, so only their shape counts
    - The profile is already L1 normalised by the aggregator and is used as is
    - Score is the dot product of the two, in [0, 1]
    - A destination with no trait scores matches nothing (0.0)
    """

    normalised = destination.traits.normalised()
    if normalised.is_zero():
        return 0.0

    return math.fsum(
        profile.traits.scores[trait] * normalised.scores[trait]
        for trait in TRAIT_TYPES
    )
