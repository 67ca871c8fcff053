from typing import Iterable, List, Sequence

from core.profile import UserProfile
from core.validation import check_count
from models.destination import Attraction

TOP_TRAIT_COUNT = 3
DEFAULT_ATTRACTION_LIMIT = 3


def top_traits(profile: UserProfile, n: int = TOP_TRAIT_COUNT) -> List[str]:
    """Return the top N traits by profile weight, ties in trait order."""
    return profile.top_traits(n)


def score_attraction(
    profile: UserProfile,
    attraction: Attraction,
    traits: Iterable[str],
) -> float:
    """
    Sum the profile weight of every top trait the attraction is tagged with.
    Categories outside `traits` contribute nothing.
    """
    categories = set(attraction.categories)
    return sum(profile.weight(t) for t in traits if t in categories)


def pick_attractions(
    profile: UserProfile,
    attractions: Sequence[Attraction],
    limit: int = DEFAULT_ATTRACTION_LIMIT,
) -> List[Attraction]:
    """
    Pick the attractions that best reflect the user's dominant traits.

    Sorted by descending score, then ascending id, truncated to `limit`.
    An empty list gives an empty pick; a missing one is an error.
    """
    limit = check_count("limit", limit)
    if attractions is None:
        raise ValueError("attractions is required")
    if not attractions or limit <= 0:
        return []

    traits = top_traits(profile)

    ranked = sorted(
        attractions,
        key=lambda a: (-score_attraction(profile, a, traits), a.id),
    )
    return ranked[:limit]
