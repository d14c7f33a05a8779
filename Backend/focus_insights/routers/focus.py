import uuid
from dataclasses import asdict
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from focus_insights.config import settings
from focus_insights.database import get_db
from focus_insights.dependencies import get_current_user
from focus_insights.models.user import User
from focus_insights.schemas.insights import FocusStatisticsResponse, InsightsResponse
from focus_insights.schemas.session import DistractionResponse, FocusSessionResponse
from focus_insights.services import insights_service, session_service

router = APIRouter(prefix="/focus", tags=["focus"])


@router.get("/insights", response_model=InsightsResponse)
async def get_productivity_insights(
    start_date: datetime | None = Query(default=None),
    end_date: datetime | None = Query(default=None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    report = await insights_service.get_productivity_insights(
        db, user.id, start=start_date, end=end_date
    )
    return InsightsResponse.model_validate(asdict(report))


@router.get("/statistics", response_model=FocusStatisticsResponse)
async def get_focus_statistics(
    start_date: datetime | None = Query(default=None),
    end_date: datetime | None = Query(default=None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    start, end, stats = await insights_service.get_focus_statistics(
        db, user.id, start=start_date, end=end_date
    )
    return FocusStatisticsResponse(window_start=start, window_end=end, **asdict(stats))


@router.get("/history", response_model=list[FocusSessionResponse])
async def get_focus_history(
    limit: int = Query(default=settings.HISTORY_LIMIT, ge=1, le=200),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await session_service.get_session_history(db, user.id, limit=limit)


@router.get("/{session_id}/distractions", response_model=list[DistractionResponse])
async def get_session_distractions(
    session_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    distractions = await session_service.get_session_distractions(db, user.id, session_id)
    if distractions is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Focus session not found"
        )
    return distractions
