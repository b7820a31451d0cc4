"""create_articles_table

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-19 09:00:12.184305+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create articles table."""
    op.create_table(
        "articles",
        # Primary key and timestamp from BaseModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_on_utc",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        # Article fields
        sa.Column("title", sa.Text(), nullable=False, comment="Article title"),
        sa.Column("content", sa.Text(), nullable=False, comment="Article body"),
        sa.Column(
            "tags",
            sa.JSON(),
            nullable=False,
            comment="Ordered tags (JSON array)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop articles table."""
    op.drop_table("articles")
