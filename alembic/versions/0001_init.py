"""init
Revision ID: 0001_init
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "authors",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("date_of_death", sa.Date(), nullable=True),
        sa.Column("main_category", sa.String(length=50), nullable=False),
    )
    op.create_index("ix_authors_main_category", "authors", ["main_category"])

    op.create_table(
        "courses",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("author_id", sa.Uuid(), sa.ForeignKey("authors.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=1500), nullable=True),
    )
    op.create_index("ix_courses_author_id", "courses", ["author_id"])

def downgrade():
    op.drop_index("ix_courses_author_id", table_name="courses")
    op.drop_table("courses")
    op.drop_index("ix_authors_main_category", table_name="authors")
    op.drop_table("authors")
