import uuid
from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from focus_insights.models.base import Base


class FocusSession(Base):
    __tablename__ = "focus_sessions"

    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    task_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("tasks.id", ondelete="SET NULL"), index=True)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))  # NULL while in progress or paused
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    session_quality_rating: Mapped[int | None] = mapped_column(Integer)  # 1-5
    task_progress_before: Mapped[int | None] = mapped_column(Integer)  # 0-100
    task_progress_after: Mapped[int | None] = mapped_column(Integer)  # 0-100
    task_completed_during_session: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    user: Mapped["User"] = relationship(back_populates="focus_sessions")  # noqa: F821
    task: Mapped["Task | None"] = relationship(back_populates="focus_sessions")  # noqa: F821
    distractions: Mapped[list["Distraction"]] = relationship(  # noqa: F821
        back_populates="focus_session",
        cascade="all, delete-orphan",
        order_by="Distraction.timestamp",
    )

    __table_args__ = (
        Index("ix_focus_sessions_user_start", "user_id", "start_time"),
        CheckConstraint("duration_minutes >= 0", name="duration_non_negative"),
        CheckConstraint("session_quality_rating BETWEEN 1 AND 5", name="quality_rating_range"),
        CheckConstraint("task_progress_before BETWEEN 0 AND 100", name="progress_before_range"),
        CheckConstraint("task_progress_after BETWEEN 0 AND 100", name="progress_after_range"),
    )
