"""Initial tables: locations (unique search_query) and its three child caches.

Revision ID: 001
Revises:
Create Date: (run alembic upgrade head)

- locations: one row per distinct search text.
- weathers, events, movies: append-only rows keyed by location_id (no FK enforced).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("search_query", sa.Text(), nullable=False, unique=True),
        sa.Column("formatted_query", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
    )
    op.create_table(
        "weathers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("forecast", sa.Text(), nullable=True),
        sa.Column("time", sa.String(32), nullable=True),
        sa.Column("location_id", sa.Integer(), nullable=False),
    )
    op.create_index("ix_weathers_location_id", "weathers", ["location_id"])
    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("link", sa.Text(), nullable=True),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("event_date", sa.String(32), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("location_id", sa.Integer(), nullable=False),
    )
    op.create_index("ix_events_location_id", "events", ["location_id"])
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("overview", sa.Text(), nullable=True),
        sa.Column("average_votes", sa.Float(), nullable=True),
        sa.Column("total_votes", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("popularity", sa.Float(), nullable=True),
        sa.Column("released_on", sa.Date(), nullable=True),
        sa.Column("location_id", sa.Integer(), nullable=False),
    )
    op.create_index("ix_movies_location_id", "movies", ["location_id"])


def downgrade() -> None:
    op.drop_index("ix_movies_location_id", table_name="movies")
    op.drop_table("movies")
    op.drop_index("ix_events_location_id", table_name="events")
    op.drop_table("events")
    op.drop_index("ix_weathers_location_id", table_name="weathers")
    op.drop_table("weathers")
    op.drop_table("locations")
