import uuid
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from focus_insights.analytics.dataset import DistractionRecord, FocusSessionRecord
from focus_insights.models.distraction import Distraction
from focus_insights.models.focus_session import FocusSession
from focus_insights.models.task import Task


def to_record(session: FocusSession) -> FocusSessionRecord:
    """Detach an ORM focus session into an analytics record.

    Expects ``task.category`` and ``distractions`` to be loaded already.
    """
    category_name = None
    if session.task is not None and session.task.category is not None:
        category_name = session.task.category.name

    return FocusSessionRecord(
        id=session.id,
        user_id=session.user_id,
        task_id=session.task_id,
        category_name=category_name,
        start_time=session.start_time,
        end_time=session.end_time,
        duration_minutes=session.duration_minutes,
        session_quality_rating=session.session_quality_rating,
        task_progress_before=session.task_progress_before,
        task_progress_after=session.task_progress_after,
        task_completed_during_session=session.task_completed_during_session,
        distractions=tuple(
            DistractionRecord(
                description=d.description,
                category=d.category,
                timestamp=d.timestamp,
            )
            for d in session.distractions
        ),
    )


async def get_focus_sessions(
    db: AsyncSession,
    user_id: uuid.UUID,
    start: datetime | None = None,
    end: datetime | None = None,
    completed_only: bool = True,
) -> list[FocusSessionRecord]:
    """A user's focus sessions in [start, end], oldest first, with task
    category and distractions attached."""
    query = (
        select(FocusSession)
        .where(FocusSession.user_id == user_id)
        .options(
            selectinload(FocusSession.task).selectinload(Task.category),
            selectinload(FocusSession.distractions),
        )
    )
    if start:
        query = query.where(FocusSession.start_time >= start)
    if end:
        query = query.where(FocusSession.start_time <= end)
    if completed_only:
        query = query.where(FocusSession.end_time.isnot(None))
    query = query.order_by(FocusSession.start_time.asc())

    result = await db.execute(query)
    return [to_record(s) for s in result.scalars().all()]


async def get_session_history(
    db: AsyncSession,
    user_id: uuid.UUID,
    limit: int = 50,
) -> list[FocusSession]:
    result = await db.execute(
        select(FocusSession)
        .where(FocusSession.user_id == user_id)
        .order_by(FocusSession.start_time.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_session_distractions(
    db: AsyncSession,
    user_id: uuid.UUID,
    session_id: uuid.UUID,
) -> list[Distraction] | None:
    """Distractions of one session in time order, or None if the session
    does not exist or belongs to someone else."""
    result = await db.execute(
        select(FocusSession.id).where(
            FocusSession.id == session_id, FocusSession.user_id == user_id
        )
    )
    if result.scalar_one_or_none() is None:
        return None

    result = await db.execute(
        select(Distraction)
        .where(Distraction.focus_session_id == session_id)
        .order_by(Distraction.timestamp.asc())
    )
    return list(result.scalars().all())
