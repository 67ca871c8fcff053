"""
Pytest fixtures for the travel quiz tests. Sample rows come from fixtures/sample_destinations.py.
"""

from __future__ import annotations

import pytest

from fixtures.sample_destinations import ATTRACTION_ROWS, OPTION_ROWS, PROVINCE_ROWS
from models.destination import Attraction, Destination


@pytest.fixture
def destinations():
    return [Destination.from_record(row) for row in PROVINCE_ROWS]


@pytest.fixture
def attractions():
    return [Attraction.from_record(row) for row in ATTRACTION_ROWS]


class FakeRepository:
    """In-memory stand-in for database.QuizRepository."""

    def __init__(self):
        self.options = {row["id"]: row for row in OPTION_ROWS}
        self.saved = {}
        self.fetched_attractions_for = None

    async def fetch_regions(self):
        return [{"id": 1, "name_th": "ภาคเหนือ", "name_en": "North"}]

    async def fetch_questions(self):
        return [{"id": 1, "question_no": 1, "question_th": "ไปไหนดี", "question_en": "Where to?", "options": []}]

    async def fetch_selected_options(self, option_ids):
        return [self.options[i] for i in option_ids if i in self.options]

    async def fetch_destinations(self, region_id=None):
        rows = [r for r in PROVINCE_ROWS if region_id is None or r["region_id"] == region_id]
        return [Destination.from_record(r) for r in rows]

    async def fetch_attractions(self, destination_ids):
        self.fetched_attractions_for = list(destination_ids)
        return [Attraction.from_record(r) for r in ATTRACTION_ROWS if r["province_id"] in destination_ids]

    async def save_quiz_result(self, attempt_id, user_id, snapshot):
        if attempt_id in self.saved:
            return False
        self.saved[attempt_id] = {
            "id": len(self.saved) + 1, "attempt_id": attempt_id, "user_id": user_id, **snapshot,
        }
        return True

    async def list_quiz_results(self, user_id, limit=20):
        return [row for row in self.saved.values() if row["user_id"] == user_id][:limit]

    async def get_quiz_result(self, result_id, user_id):
        for row in self.saved.values():
            if row["id"] == result_id and row["user_id"] == user_id:
                return row
        return None


@pytest.fixture
def fake_repo():
    return FakeRepository()


@pytest.fixture
def client(fake_repo):
    """FastAPI TestClient with the repository dependency swapped for the fake."""
    from fastapi.testclient import TestClient

    from api import app
    from database import get_repository

    app.dependency_overrides[get_repository] = lambda: fake_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
