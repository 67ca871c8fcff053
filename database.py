"""
Data access for quiz content, destinations and stored results.
All reads and writes go through the Supabase REST client.
"""
import logging
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Sequence

from models.destination import Attraction, Destination
from supabase_client import SupabaseClient, supabase_client

logger = logging.getLogger(__name__)


class DataStoreError(RuntimeError):
    """The store answered with an error or could not be reached."""


def _rows(result: Dict[str, Any], what: str) -> List[Dict[str, Any]]:
    if result.get("error"):
        raise DataStoreError(f"Failed to {what}: {result['error']}")
    return result.get("data") or []


class QuizRepository:
    def __init__(self, client: SupabaseClient = supabase_client):
        self.client = client

    async def fetch_regions(self) -> List[Dict[str, Any]]:
        result = await self.client.query("regions").select("id, name_th, name_en").order("id").execute()
        return _rows(result, "load regions")

    async def fetch_questions(self) -> List[Dict[str, Any]]:
        """Questions ordered by number, each with its options ordered by label."""
        q_result = await self.client.query("quiz_questions") \
            .select("id, question_no, question_th, question_en") \
            .order("question_no") \
            .execute()
        questions = _rows(q_result, "load quiz questions")
        if not questions:
            return []

        o_result = await self.client.query("quiz_options") \
            .select("id, question_id, option_label, option_th, option_en") \
            .in_("question_id", [q["id"] for q in questions]) \
            .order("option_label") \
            .execute()
        options = _rows(o_result, "load quiz options")

        by_id = OrderedDict((q["id"], {**q, "options": []}) for q in questions)
        for option in options:
            question = by_id.get(option.get("question_id"))
            if question is not None:
                question["options"].append(option)

        return list(by_id.values())

    async def fetch_selected_options(self, option_ids: Sequence[int]) -> List[Dict[str, Any]]:
        if not option_ids:
            return []
        result = await self.client.query("quiz_options").select("*").in_("id", list(option_ids)).execute()
        return _rows(result, "load selected options")

    async def fetch_destinations(self, region_id: Optional[int] = None) -> List[Destination]:
        query = self.client.query("provinces").select("*")
        if region_id is not None:
            query = query.eq("region_id", region_id)

        rows = _rows(await query.execute(), "load provinces")
        return [Destination.from_record(row) for row in rows]

    async def fetch_attractions(self, destination_ids: Sequence[int]) -> List[Attraction]:
        if not destination_ids:
            return []
        result = await self.client.query("province_attractions") \
            .select("*") \
            .in_("province_id", list(destination_ids)) \
            .execute()
        return [Attraction.from_record(row) for row in _rows(result, "load attractions")]

    async def save_quiz_result(
        self,
        attempt_id: str,
        user_id: Optional[str],
        snapshot: Dict[str, Any],
    ) -> bool:
        """
        Store a result snapshot once per attempt.

        Upserts on attempt_id with duplicates ignored, so a repeated save for
        the same attempt is a no-op. Returns True when a row was written.
        """
        row = {"attempt_id": attempt_id, "user_id": user_id, **snapshot}
        result = await self.client.query("quiz_results") \
            .upsert(row, on_conflict="attempt_id", ignore_duplicates=True) \
            .execute()
        written = bool(_rows(result, "save quiz result"))
        if written:
            logger.info("Saved quiz result for attempt %s", attempt_id)
        else:
            logger.info("Quiz result for attempt %s already stored", attempt_id)
        return written

    async def list_quiz_results(self, user_id: str, limit: int = 20) -> List[Dict[str, Any]]:
        result = await self.client.query("quiz_results") \
            .select("*") \
            .eq("user_id", user_id) \
            .order("created_at", desc=True) \
            .limit(limit) \
            .execute()
        return _rows(result, "load quiz history")

    async def get_quiz_result(self, result_id: int, user_id: str) -> Optional[Dict[str, Any]]:
        """A stored result, only if it belongs to `user_id`."""
        result = await self.client.query("quiz_results") \
            .select("*") \
            .eq("id", result_id) \
            .eq("user_id", user_id) \
            .execute()
        rows = _rows(result, "load quiz result")
        return rows[0] if rows else None


def get_repository() -> QuizRepository:
    return QuizRepository()
