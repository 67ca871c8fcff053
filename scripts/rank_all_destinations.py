"""
Print the full destination ranking for a set of selected quiz options.
Run from the project root: python scripts/rank_all_destinations.py 1 3
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fixtures.sample_destinations import ATTRACTION_ROWS, OPTION_ROWS, PROVINCE_ROWS
from inference.answer_converter import convert_options_to_profile
from matching.engine import recommend
from models.destination import Attraction, Destination


def rank_all(option_ids):
    rows = [row for row in OPTION_ROWS if row["id"] in set(option_ids)]
    profile = convert_options_to_profile(rows)

    destinations = [Destination.from_record(row) for row in PROVINCE_ROWS]
    attractions = [Attraction.from_record(row) for row in ATTRACTION_ROWS]

    return recommend(profile, destinations, attractions, k=len(destinations))


def main(argv):
    option_ids = [int(a) for a in argv] or [1, 3]
    result = rank_all(option_ids)

    print("Profile:", {t: round(w, 3) for t, w in result.profile.traits.to_dict().items()})
    print("Top trait:", result.profile.top_trait())

    print("\n===== DESTINATION RANKINGS =====\n")
    for rank, item in enumerate(result.destinations, start=1):
        print(f"{rank:3d}. {item.destination.name_en}  |  SCORE: {item.score:.3f}")
        for attraction in item.attractions:
            print(f"       - {attraction.name_en} {list(attraction.categories)}")


if __name__ == "__main__":
    main(sys.argv[1:])
