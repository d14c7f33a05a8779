import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from focus_insights.models.base import Base


class Distraction(Base):
    __tablename__ = "distractions"

    focus_session_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("focus_sessions.id", ondelete="CASCADE"), nullable=False
    )
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    category: Mapped[str] = mapped_column(
        String(100), nullable=False
    )  # e.g. Phone, Social Media, Noise, Other
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    focus_session: Mapped["FocusSession"] = relationship(back_populates="distractions")  # noqa: F821

    __table_args__ = (
        Index("ix_distractions_session_timestamp", "focus_session_id", "timestamp"),
    )
