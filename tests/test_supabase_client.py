"""
Tests for the REST client and QuizRepository. HTTP is served by httpx.MockTransport.
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from database import DataStoreError, QuizRepository
from supabase_client import ConfigurationError, SupabaseClient


def make_client(handler):
    return SupabaseClient(
        url="https://example.supabase.co/",
        key="secret",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


def test_select_builds_postgrest_query():
    seen = {}

    def handler(request: httpx.Request):
        seen["url"] = request.url
        seen["headers"] = request.headers
        return httpx.Response(200, json=[{"id": 1}])

    client = make_client(handler)
    result = asyncio.run(
        client.query("provinces").select("*").eq("region_id", 2).in_("id", [1, 2]).order("id").execute()
    )

    assert result["data"] == [{"id": 1}]
    assert result["error"] is None
    assert seen["url"].path == "/rest/v1/provinces"
    assert seen["url"].params["region_id"] == "eq.2"
    assert seen["url"].params["id"] == "in.(1,2)"
    assert seen["url"].params["order"] == "id.asc"
    assert seen["headers"]["apikey"] == "secret"
    assert seen["headers"]["authorization"] == "Bearer secret"


def test_upsert_sends_conflict_and_prefer():
    seen = {}

    def handler(request: httpx.Request):
        seen["request"] = request
        return httpx.Response(201, json=[json.loads(request.content)])

    client = make_client(handler)
    result = asyncio.run(
        client.query("quiz_results").upsert({"attempt_id": "a"}, on_conflict="attempt_id", ignore_duplicates=True).execute()
    )

    request = seen["request"]
    assert request.method == "POST"
    assert request.url.params["on_conflict"] == "attempt_id"
    assert "resolution=ignore-duplicates" in request.headers["prefer"]
    assert result["data"] == [{"attempt_id": "a"}]


def test_error_payload_reported():
    client = make_client(lambda request: httpx.Response(400, json={"message": "bad column"}))
    result = asyncio.run(client.query("provinces").select("*").execute())
    assert result["error"] == {"message": "bad column"}
    assert result["status_code"] == 400


def test_transport_failure_reported():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    result = asyncio.run(make_client(handler).query("provinces").select("*").execute())
    assert result["data"] == []
    assert "refused" in result["error"]


def test_unconfigured_client_raises():
    client = SupabaseClient(url="", key="")
    with pytest.raises(ConfigurationError):
        asyncio.run(client.query("provinces").select("*").execute())


# --- Repository ---


def test_fetch_questions_groups_options():
    def handler(request: httpx.Request):
        if request.url.path.endswith("quiz_questions"):
            return httpx.Response(200, json=[
                {"id": 1, "question_no": 1, "question_th": "ก", "question_en": "A"},
                {"id": 2, "question_no": 2, "question_th": "ข", "question_en": "B"},
            ])
        assert request.url.params["question_id"] == "in.(1,2)"
        return httpx.Response(200, json=[
            {"id": 10, "question_id": 2, "option_label": "A"},
            {"id": 11, "question_id": 1, "option_label": "A"},
            {"id": 12, "question_id": 1, "option_label": "B"},
        ])

    questions = asyncio.run(QuizRepository(make_client(handler)).fetch_questions())
    assert [q["id"] for q in questions] == [1, 2]
    assert [o["id"] for o in questions[0]["options"]] == [11, 12]
    assert [o["id"] for o in questions[1]["options"]] == [10]


def test_fetch_destinations_parses_rows():
    rows = [{"id": 3, "region_id": 2, "name_th": "กระบี่", "name_en": "Krabi", "sea_score": 5, "nature_score": 4}]
    repo = QuizRepository(make_client(lambda request: httpx.Response(200, json=rows)))

    destinations = asyncio.run(repo.fetch_destinations(region_id=2))
    assert destinations[0].name_en == "Krabi"
    assert destinations[0].traits.get("sea") == 5.0


def test_repository_raises_on_store_error():
    repo = QuizRepository(make_client(lambda request: httpx.Response(500, text="oops")))
    with pytest.raises(DataStoreError):
        asyncio.run(repo.fetch_regions())


def test_empty_id_lists_skip_requests():
    def handler(request):
        raise AssertionError("no request expected")

    repo = QuizRepository(make_client(handler))
    assert asyncio.run(repo.fetch_selected_options([])) == []
    assert asyncio.run(repo.fetch_attractions([])) == []


def test_save_quiz_result_reports_duplicate():
    responses = iter([
        httpx.Response(201, json=[{"id": 1, "attempt_id": "a"}]),
        httpx.Response(201, json=[]),
    ])
    repo = QuizRepository(make_client(lambda request: next(responses)))
    snapshot = {"recommended_provinces": [], "recommended_locations": []}

    assert asyncio.run(repo.save_quiz_result("a", "u1", snapshot)) is True
    assert asyncio.run(repo.save_quiz_result("a", "u1", snapshot)) is False


def test_get_quiz_result_filters_by_user():
    seen = {}

    def handler(request: httpx.Request):
        seen["params"] = request.url.params
        return httpx.Response(200, json=[])

    repo = QuizRepository(make_client(handler))
    assert asyncio.run(repo.get_quiz_result(7, "u1")) is None
    assert seen["params"]["id"] == "eq.7"
    assert seen["params"]["user_id"] == "eq.u1"
