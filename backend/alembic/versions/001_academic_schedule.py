# backend/alembic/versions/001_academic_schedule.py
"""Academic schedule core tables

Revision ID: 001_academic_schedule
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_academic_schedule"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_extension_prefer_extensions_schema(extension_name: str) -> None:
    """Create extension using extensions schema when available."""

    bind = op.get_bind()
    if bind is None or bind.dialect.name != "postgresql":
        return

    op.execute(
        f"""
        DO $$
        DECLARE
            extensions_schema_exists BOOLEAN;
            extension_installed BOOLEAN;
        BEGIN
            SELECT EXISTS (
                SELECT 1 FROM pg_namespace WHERE nspname = 'extensions'
            ) INTO extensions_schema_exists;

            SELECT EXISTS (
                SELECT 1 FROM pg_extension WHERE extname = '{extension_name}'
            ) INTO extension_installed;

            IF NOT extension_installed THEN
                IF extensions_schema_exists THEN
                    EXECUTE 'CREATE EXTENSION IF NOT EXISTS {extension_name} WITH SCHEMA extensions';
                ELSE
                    EXECUTE 'CREATE EXTENSION IF NOT EXISTS {extension_name}';
                END IF;
            END IF;
        END
        $$;
        """
    )


def _timestamps() -> list:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    """Create users, periods, shift configuration and availability tables."""
    print("Creating academic schedule tables...")

    bind = op.get_bind()
    is_postgres = bind is not None and bind.dialect.name == "postgresql"

    op.create_table(
        "users",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "teaching_periods",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("semester", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="INACTIVE"),
        sa.Column("starts_on", sa.Date(), nullable=True),
        sa.Column("ends_on", sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("year", "semester", name="unique_period_year_semester"),
    )

    op.create_table(
        "shift_configurations",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("scope", sa.String(16), nullable=False, server_default="global"),
        sa.Column("lesson_duration_minutes", sa.Integer(), nullable=False),
        sa.Column("lessons_per_shift", sa.Integer(), nullable=False),
        sa.Column("morning_start", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        sa.Column("afternoon_start", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        sa.Column("evening_start", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("scope"),
        sa.CheckConstraint("lesson_duration_minutes > 0", name="check_lesson_duration_positive"),
        sa.CheckConstraint("lessons_per_shift > 0", name="check_lessons_per_shift_positive"),
    )

    op.create_table(
        "professor_availabilities",
        sa.Column("id", sa.String(26), nullable=False),
        sa.Column("professor_id", sa.String(26), nullable=False),
        sa.Column("period_id", sa.String(26), nullable=False),
        sa.Column("day_of_week", sa.String(16), nullable=False),
        sa.Column("start_time", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        sa.Column("end_time", sa.Integer(), nullable=False, comment="Minutes since midnight"),
        sa.Column("status", sa.String(16), nullable=False, server_default="AVAILABLE"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["professor_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["period_id"], ["teaching_periods.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("end_time > start_time", name="check_availability_time_order"),
        sa.UniqueConstraint(
            "professor_id",
            "period_id",
            "day_of_week",
            "start_time",
            name="unique_professor_period_day_start",
        ),
    )
    op.create_index(
        "idx_availability_professor_period_day",
        "professor_availabilities",
        ["professor_id", "period_id", "day_of_week"],
    )
    op.create_index("idx_availability_period", "professor_availabilities", ["period_id"])

    if is_postgres:
        _create_extension_prefer_extensions_schema("btree_gist")
        op.execute(
            """
            ALTER TABLE professor_availabilities
              ADD CONSTRAINT professor_availabilities_no_overlap
              EXCLUDE USING gist (
                professor_id WITH =,
                period_id WITH =,
                day_of_week WITH =,
                int4range(start_time, end_time, '[)') WITH &&
              )
            """
        )

    print("Academic schedule tables created")


def downgrade() -> None:
    """Drop academic schedule tables."""
    print("Dropping academic schedule tables...")

    bind = op.get_bind()
    if bind is not None and bind.dialect.name == "postgresql":
        op.execute(
            "ALTER TABLE professor_availabilities "
            "DROP CONSTRAINT IF EXISTS professor_availabilities_no_overlap"
        )

    op.drop_index("idx_availability_period", table_name="professor_availabilities")
    op.drop_index("idx_availability_professor_period_day", table_name="professor_availabilities")
    op.drop_table("professor_availabilities")
    op.drop_table("shift_configurations")
    op.drop_table("teaching_periods")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
