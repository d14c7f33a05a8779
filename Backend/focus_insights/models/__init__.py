from focus_insights.models.base import Base
from focus_insights.models.category import Category
from focus_insights.models.distraction import Distraction
from focus_insights.models.focus_session import FocusSession
from focus_insights.models.task import Task
from focus_insights.models.user import User

__all__ = [
    "Base",
    "Category",
    "Distraction",
    "FocusSession",
    "Task",
    "User",
]
