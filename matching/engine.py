from collections import defaultdict
from typing import Dict, List, Sequence

from core.profile import UserProfile
from core.validation import check_count
from models.destination import (
    Attraction,
    Destination,
    DestinationResult,
    RankedDestination,
    RecommendationResult,
)
from matching.attractions import DEFAULT_ATTRACTION_LIMIT, pick_attractions
from matching.similarity import match_destination

"""
Matching orchestration layer.

Ranks destinations against a profile and attaches picked attractions.
Scoring itself lives in matching.similarity and matching.attractions.
"""

DEFAULT_TOP_K = 3


def match_destinations(
    profile: UserProfile,
    destinations: Sequence[Destination],
    k: int = DEFAULT_TOP_K,
) -> List[RankedDestination]:
    """
    Entry point for ranking.

    Sorts by descending match score; equal scores fall back to ascending
    destination id so identical inputs always give the same order.
    Returns the top `k`.
    """
    k = check_count("k", k)
    if destinations is None:
        raise ValueError("destinations is required")

    scored = [
        RankedDestination(destination=d, score=match_destination(profile, d))
        for d in destinations
    ]
    scored.sort(key=lambda r: (-r.score, r.destination.id))

    return scored[:max(k, 0)]


def group_attractions(attractions: Sequence[Attraction]) -> Dict[int, List[Attraction]]:
    grouped: Dict[int, List[Attraction]] = defaultdict(list)
    for attraction in attractions:
        grouped[attraction.destination_id].append(attraction)
    return grouped


def attach_attractions(
    profile: UserProfile,
    ranked: Sequence[RankedDestination],
    attractions: Sequence[Attraction] = (),
    limit: int = DEFAULT_ATTRACTION_LIMIT,
) -> RecommendationResult:
    """
    Pick up to `limit` attractions for each already-ranked destination from
    the attractions that belong to it. Ranking order and scores are kept.
    """
    limit = check_count("limit", limit)
    if ranked is None:
        raise ValueError("ranked destinations are required")

    by_destination = group_attractions(attractions or ())

    items = tuple(
        DestinationResult(
            destination=r.destination,
            score=r.score,
            attractions=tuple(
                pick_attractions(profile, by_destination.get(r.destination.id, []), limit)
            ),
        )
        for r in ranked
    )

    return RecommendationResult(profile=profile, destinations=items)


def recommend(
    profile: UserProfile,
    destinations: Sequence[Destination],
    attractions: Sequence[Attraction] = (),
    k: int = DEFAULT_TOP_K,
    limit: int = DEFAULT_ATTRACTION_LIMIT,
) -> RecommendationResult:
    """Rank destinations, then attach picked attractions to the top `k`."""
    limit = check_count("limit", limit)
    return attach_attractions(profile, match_destinations(profile, destinations, k), attractions, limit)
