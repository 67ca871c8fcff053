"""
FastAPI application for the Travel Quiz destination recommender
Uses Supabase REST API through database.QuizRepository
"""
import logging
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import FastAPI, Depends, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from config import configure_logging, get_settings
from database import DataStoreError, QuizRepository, get_repository
from inference.answer_converter import convert_options_to_profile
from matching.engine import attach_attractions, match_destinations
from supabase_client import ConfigurationError

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Travel Quiz API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Update with your frontend URL in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class QuizSubmission(BaseModel):
    """Selected option ids from the quiz"""
    selected_option_ids: List[int]
    region_id: Optional[int] = None
    attempt_id: Optional[str] = None
    user_id: Optional[str] = None
    top_k: Optional[int] = Field(default=None, ge=1, le=20)
    attraction_limit: Optional[int] = Field(default=None, ge=0, le=20)


class AttractionOut(BaseModel):
    id: int
    name_th: Optional[str] = None
    name_en: Optional[str] = None
    description: Optional[str] = None
    categories: List[str] = []


class DestinationOut(BaseModel):
    id: int
    name_th: Optional[str] = None
    name_en: Optional[str] = None
    score: float
    attractions: List[AttractionOut]


class QuizResultResponse(BaseModel):
    attempt_id: str
    saved: bool
    profile: Dict[str, float]
    raw_scores: Dict[str, float]
    top_trait: Optional[str] = None
    destinations: List[DestinationOut]


# ============================================================================
# ERROR HANDLING
# ============================================================================

def _store_failure(e: Exception) -> HTTPException:
    if isinstance(e, ConfigurationError):
        logger.error("Data store not configured: %s", e)
        return HTTPException(status_code=503, detail="Data store is not configured")
    logger.error("Data store error: %s", e)
    return HTTPException(status_code=502, detail=f"Could not load quiz data: {e}")


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "travel-quiz-backend",
        "timestamp": datetime.now().isoformat()
    }


# ============================================================================
# QUIZ CONTENT
# ============================================================================

@app.get("/regions")
async def list_regions(repo: QuizRepository = Depends(get_repository)):
    try:
        return {"regions": await repo.fetch_regions()}
    except (DataStoreError, ConfigurationError) as e:
        raise _store_failure(e)


@app.get("/quiz")
async def get_quiz(repo: QuizRepository = Depends(get_repository)):
    try:
        return {"questions": await repo.fetch_questions()}
    except (DataStoreError, ConfigurationError) as e:
        raise _store_failure(e)


# ============================================================================
# RESULTS
# ============================================================================

@app.post("/quiz/results", response_model=QuizResultResponse)
async def submit_quiz(
        submission: QuizSubmission,
        repo: QuizRepository = Depends(get_repository)
):
    """Score the selected options and recommend destinations with attractions"""
    settings = get_settings()
    top_k = submission.top_k or settings.results_top_k
    limit = (
        submission.attraction_limit
        if submission.attraction_limit is not None
        else settings.attractions_per_destination
    )

    try:
        option_rows = await repo.fetch_selected_options(submission.selected_option_ids)
        destinations = await repo.fetch_destinations(submission.region_id)
    except (DataStoreError, ConfigurationError) as e:
        raise _store_failure(e)
    except ValueError as e:
        raise HTTPException(status_code=502, detail=f"Malformed destination data: {e}")

    missing = set(submission.selected_option_ids) - {row.get("id") for row in option_rows}
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown option ids: {', '.join(str(i) for i in sorted(missing))}"
        )

    try:
        profile = convert_options_to_profile(option_rows)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Error converting answers: {e}")

    try:
        # Ranking first keeps the attraction fetch scoped to the top K
        shortlist = match_destinations(profile, destinations, top_k)
        attractions = await repo.fetch_attractions([r.destination.id for r in shortlist])
    except (DataStoreError, ConfigurationError) as e:
        raise _store_failure(e)
    except ValueError as e:
        raise HTTPException(status_code=502, detail=f"Malformed attraction data: {e}")

    result = attach_attractions(profile, shortlist, attractions, limit)
    logger.info(
        "Ranked %d of %d destinations for %d options",
        len(result.destinations), len(destinations), profile.answer_count,
    )

    attempt_id = submission.attempt_id or str(uuid.uuid4())
    saved = False
    if submission.attempt_id:
        try:
            saved = await repo.save_quiz_result(attempt_id, submission.user_id, result.to_snapshot())
        except (DataStoreError, ConfigurationError) as e:
            # The ranking is still useful to the caller; they may retry the save
            logger.error("Could not save quiz result for %s: %s", attempt_id, e)

    return QuizResultResponse(
        attempt_id=attempt_id,
        saved=saved,
        profile=profile.traits.to_dict(),
        raw_scores=profile.raw.to_dict(),
        top_trait=profile.top_trait(),
        destinations=[
            DestinationOut(
                id=item.destination.id,
                name_th=item.destination.name_th,
                name_en=item.destination.name_en,
                score=item.score,
                attractions=[
                    AttractionOut(
                        id=a.id,
                        name_th=a.name_th,
                        name_en=a.name_en,
                        description=a.description,
                        categories=list(a.categories),
                    )
                    for a in item.attractions
                ],
            )
            for item in result.destinations
        ],
    )


# ============================================================================
# HISTORY
# ============================================================================

@app.get("/history")
async def list_history(
        user_id: str = Query(...),
        repo: QuizRepository = Depends(get_repository)
):
    try:
        return {"results": await repo.list_quiz_results(user_id)}
    except (DataStoreError, ConfigurationError) as e:
        raise _store_failure(e)


@app.get("/history/{result_id}")
async def get_history_item(
        result_id: int,
        user_id: str = Query(...),
        repo: QuizRepository = Depends(get_repository)
):
    try:
        row = await repo.get_quiz_result(result_id, user_id)
    except (DataStoreError, ConfigurationError) as e:
        raise _store_failure(e)

    if not row:
        raise HTTPException(status_code=404, detail="Result not found")
    return row
