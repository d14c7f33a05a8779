"""Initial schema - users, categories, tasks, focus sessions, distractions

Revision ID: 001
Revises:
Create Date: 2026-10-16
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Users
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # Categories
    op.create_table(
        "categories",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_categories"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_categories_user_id_users", ondelete="CASCADE"),
    )
    op.create_index("ix_categories_user_id", "categories", ["user_id"])

    # Tasks
    op.create_table(
        "tasks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("category_id", sa.Uuid(), nullable=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_tasks"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_tasks_user_id_users", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], name="fk_tasks_category_id_categories", ondelete="SET NULL"),
    )
    op.create_index("ix_tasks_user_id", "tasks", ["user_id"])
    op.create_index("ix_tasks_category_id", "tasks", ["category_id"])

    # Focus sessions
    op.create_table(
        "focus_sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("task_id", sa.Uuid(), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("duration_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("session_quality_rating", sa.Integer(), nullable=True),
        sa.Column("task_progress_before", sa.Integer(), nullable=True),
        sa.Column("task_progress_after", sa.Integer(), nullable=True),
        sa.Column("task_completed_during_session", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_focus_sessions"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_focus_sessions_user_id_users", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["task_id"], ["tasks.id"], name="fk_focus_sessions_task_id_tasks", ondelete="SET NULL"),
        sa.CheckConstraint("duration_minutes >= 0", name="ck_focus_sessions_duration_non_negative"),
        sa.CheckConstraint("session_quality_rating BETWEEN 1 AND 5", name="ck_focus_sessions_quality_rating_range"),
        sa.CheckConstraint("task_progress_before BETWEEN 0 AND 100", name="ck_focus_sessions_progress_before_range"),
        sa.CheckConstraint("task_progress_after BETWEEN 0 AND 100", name="ck_focus_sessions_progress_after_range"),
    )
    op.create_index("ix_focus_sessions_user_id", "focus_sessions", ["user_id"])
    op.create_index("ix_focus_sessions_task_id", "focus_sessions", ["task_id"])
    op.create_index("ix_focus_sessions_user_start", "focus_sessions", ["user_id", "start_time"])

    # Distractions
    op.create_table(
        "distractions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("focus_session_id", sa.Uuid(), nullable=False),
        sa.Column("description", sa.String(500), nullable=False, server_default=""),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_distractions"),
        sa.ForeignKeyConstraint(["focus_session_id"], ["focus_sessions.id"], name="fk_distractions_focus_session_id_focus_sessions", ondelete="CASCADE"),
    )
    op.create_index("ix_distractions_session_timestamp", "distractions", ["focus_session_id", "timestamp"])


def downgrade() -> None:
    op.drop_table("distractions")
    op.drop_table("focus_sessions")
    op.drop_table("tasks")
    op.drop_table("categories")
    op.drop_table("users")
