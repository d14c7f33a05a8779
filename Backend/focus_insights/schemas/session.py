import uuid
from datetime import datetime

from pydantic import BaseModel


class DistractionResponse(BaseModel):
    id: uuid.UUID
    focus_session_id: uuid.UUID
    description: str
    category: str
    timestamp: datetime

    model_config = {"from_attributes": True}


class FocusSessionResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    task_id: uuid.UUID | None
    start_time: datetime
    end_time: datetime | None
    duration_minutes: int
    session_quality_rating: int | None
    task_progress_before: int | None
    task_progress_after: int | None
    task_completed_during_session: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
