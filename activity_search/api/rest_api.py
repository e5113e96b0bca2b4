"""
REST API for the activity listing.
Exposes the ranked, access-filtered search over activities via HTTP endpoints.
"""

import secrets
import os
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends, Header, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import API_VERSION, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..exceptions import InvalidArgument, SearchCancelled, UpstreamUnavailable
from ..logger import setup_logger
from ..models.activity import Activity
from ..services.search_service import ActivitySearchService, get_search_service

logger = setup_logger(__name__)

# ============================================================================
# API Configuration
# ============================================================================

API_KEY = os.environ.get("ACTIVITY_SEARCH_API_KEY", None)

# Generate a random API key if not set (for development)
if not API_KEY:
    API_KEY = secrets.token_urlsafe(32)
    logger.warning("No ACTIVITY_SEARCH_API_KEY set. Generated a temporary key for this process")


# ============================================================================
# Models
# ============================================================================

class ActivityResponse(BaseModel):
    """Activity as listed by the search endpoints."""
    id: Optional[str]
    name: Optional[str]
    category: Optional[str]
    comments: Optional[str]
    begin_date: Optional[datetime]
    end_date: Optional[datetime]
    visibility: str
    owner_id: Optional[str]

    @classmethod
    def from_activity(cls, activity: Activity) -> 'ActivityResponse':
        return cls(
            id=activity.id,
            name=activity.name,
            category=activity.category,
            comments=activity.comments,
            begin_date=activity.begin_date,
            end_date=activity.end_date,
            visibility=activity.visibility,
            owner_id=activity.owner_id,
        )

class PageResponse(BaseModel):
    """One page of search results."""
    items: List[ActivityResponse]
    total_count: int = Field(..., description="Matches across all pages")
    page: int
    size: int
    total_pages: int

class StreamResponse(BaseModel):
    """Every matching activity, ranked."""
    items: List[ActivityResponse]
    count: int

class CategoryResponse(BaseModel):
    """A canonical category and the keywords that resolve to it."""
    code: str
    label: Optional[str]
    keywords: List[str]

class HealthResponse(BaseModel):
    """API health check response."""
    status: str
    version: str
    timestamp: datetime


# ============================================================================
# API Security
# ============================================================================

async def verify_api_key(x_api_key: str = Header(None, alias="X-API-Key")):
    """Verify the API key from header."""
    if not x_api_key:
        raise HTTPException(status_code=401, detail="Missing X-API-Key header")

    # Constant-time comparison to prevent timing attacks
    if not secrets.compare_digest(x_api_key, API_KEY):
        raise HTTPException(status_code=403, detail="Invalid API key")

    return x_api_key


def _friend_ids(x_friend_ids: Optional[str]) -> List[str]:
    if not x_friend_ids:
        return []
    return [friend.strip() for friend in x_friend_ids.split(",") if friend.strip()]


# ============================================================================
# FastAPI App
# ============================================================================

api = FastAPI(
    title="Activity Search API",
    description="Ranked, multilingual search over activities",
    version=API_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

api.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@api.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@api.exception_handler(UpstreamUnavailable)
async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailable):
    logger.error(f"{request.url.path}: activity store unavailable: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Activity store unavailable"})


@api.exception_handler(SearchCancelled)
async def search_cancelled_handler(request: Request, exc: SearchCancelled):
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=504, content={"detail": str(exc)})


# ============================================================================
# Endpoints
# ============================================================================

@api.get("/api/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if API is running."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        timestamp=datetime.now()
    )


@api.get(f"/api/{API_VERSION}/activities/search", response_model=PageResponse, tags=["Activities"])
def search_activities(
    filter: Optional[str] = Query(None, description="Free-text filter; empty or * lists everything"),
    page: int = Query(0, ge=0, description="0-based page number"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
    x_friend_ids: Optional[str] = Header(None, alias="X-Friend-Ids"),
    service: ActivitySearchService = Depends(get_search_service),
    _: str = Depends(verify_api_key),
):
    """
    Search activities visible to the caller, ranked by date, relevance and name.

    Public activities are visible to everyone; private ones only to their owner.
    """
    result = service.search(filter, x_user_id, page, size, friend_ids=_friend_ids(x_friend_ids))
    return PageResponse(
        items=[ActivityResponse.from_activity(activity) for activity in result.items],
        total_count=result.total_count,
        page=result.page_index,
        size=result.page_size,
        total_pages=result.total_pages,
    )


@api.get(f"/api/{API_VERSION}/activities/stream", response_model=StreamResponse, tags=["Activities"])
def stream_activities(
    filter: Optional[str] = Query(None, description="Free-text filter; empty or * lists everything"),
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
    x_friend_ids: Optional[str] = Header(None, alias="X-Friend-Ids"),
    service: ActivitySearchService = Depends(get_search_service),
    _: str = Depends(verify_api_key),
):
    """Every activity matching the filter, in ranking order, without paging."""
    activities = service.search_all(filter, x_user_id, friend_ids=_friend_ids(x_friend_ids))
    return StreamResponse(
        items=[ActivityResponse.from_activity(activity) for activity in activities],
        count=len(activities),
    )


@api.get(f"/api/{API_VERSION}/categories", response_model=List[CategoryResponse], tags=["Helpers"])
def get_categories(
    service: ActivitySearchService = Depends(get_search_service),
    _: str = Depends(verify_api_key),
):
    """Get all canonical categories with their multilingual keywords."""
    return [CategoryResponse(**category) for category in service.list_categories()]


def get_api_app() -> FastAPI:
    """Get the FastAPI app for mounting."""
    return api
