"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates all tables for the Campus Events application:
events, students, registrations, feedback.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- events ---
    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.String(500), nullable=False, server_default=""),
        sa.Column("venue", sa.String(300), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("max_capacity", sa.Integer, nullable=False, server_default="100"),
        sa.Column("registration_deadline", sa.DateTime(timezone=True), nullable=True),
        # Enum columns store member names
        sa.Column("category", sa.String(20), nullable=False, server_default="academic"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("modified_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("max_capacity >= 1 AND max_capacity <= 10000", name="ck_events_max_capacity"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_events_date", "events", ["date"])
    op.create_index("ix_events_title", "events", ["title"])

    # --- students ---
    op.create_table(
        "students",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(15), nullable=True),
        sa.Column("student_identifier", sa.String(20), nullable=False, server_default=""),
        sa.Column("department", sa.String(100), nullable=False, server_default=""),
        sa.Column("year_of_study", sa.Integer, nullable=False, server_default="1"),
        sa.Column("enrollment_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_students_email_lower", "students", [sa.text("lower(email)")], unique=True)
    op.create_index("ix_students_student_identifier", "students", ["student_identifier"])

    # --- registrations ---
    op.create_table(
        "registrations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        sa.Column("student_id", sa.Integer, sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("registration_timestamp", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("status", sa.String(20), nullable=False, server_default="confirmed"),
        sa.Column("special_requirements", sa.String(500), nullable=False, server_default=""),
        sa.Column("has_checked_in", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("check_in_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.String(200), nullable=False, server_default=""),
        sa.UniqueConstraint("event_id", "student_id", name="uq_registrations_event_student"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_registrations_event_id", "registrations", ["event_id"])
    op.create_index("ix_registrations_student_id", "registrations", ["student_id"])

    # --- feedback ---
    op.create_table(
        "feedback",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        sa.Column("student_id", sa.Integer, sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("rating", sa.Integer, nullable=False),
        sa.Column("organization_rating", sa.Integer, nullable=False, server_default="3"),
        sa.Column("content_rating", sa.Integer, nullable=False, server_default="3"),
        sa.Column("venue_rating", sa.Integer, nullable=False, server_default="3"),
        sa.Column("comment", sa.String(1000), nullable=False, server_default=""),
        sa.Column("suggestions", sa.String(500), nullable=False, server_default=""),
        sa.Column("would_recommend", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("event_id", "student_id", name="uq_feedback_event_student"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_feedback_rating"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_feedback_event_id", "feedback", ["event_id"])
    op.create_index("ix_feedback_student_id", "feedback", ["student_id"])


def downgrade() -> None:
    op.drop_table("feedback")
    op.drop_table("registrations")
    op.drop_index("ix_students_student_identifier", table_name="students")
    op.drop_index("ix_students_email_lower", table_name="students")
    op.drop_table("students")
    op.drop_index("ix_events_title", table_name="events")
    op.drop_index("ix_events_date", table_name="events")
    op.drop_table("events")
