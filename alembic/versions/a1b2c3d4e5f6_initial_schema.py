"""Initial schema: sources, posts, keywords, users, mentions, notifications

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "source",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("handle", sa.String(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("private", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_source_handle", "source", ["handle"], unique=True)

    op.create_table(
        "user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("username", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_user_username", "user", ["username"], unique=True)

    op.create_table(
        "post",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("short_id", sa.String(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("url", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("source_id", sa.String(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.ForeignKeyConstraint(["source_id"], ["source.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_post_short_id", "post", ["short_id"], unique=True)
    op.create_index("ix_post_source_id", "post", ["source_id"], unique=False)

    op.create_table(
        "keyword",
        sa.Column("value", sa.String(), nullable=False),
        sa.Column("status", sa.String(length=7), nullable=False, server_default="pending"),
        sa.Column("occurrences", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("synonym", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.PrimaryKeyConstraint("value"),
    )
    op.create_index("idx_keyword_status_occurrences", "keyword", ["status", "occurrences"], unique=False)

    op.create_table(
        "post_keyword",
        sa.Column("post_id", sa.String(), nullable=False),
        sa.Column("keyword", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "keyword"),
    )
    op.create_index("ix_post_keyword_keyword", "post_keyword", ["keyword"], unique=False)

    op.create_table(
        "post_mention",
        sa.Column("post_id", sa.String(), nullable=False),
        sa.Column("mentioned_user_id", sa.String(), nullable=False),
        sa.Column("mentioned_by_user_id", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["mentioned_user_id"], ["user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["mentioned_by_user_id"], ["user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "mentioned_user_id", "mentioned_by_user_id"),
    )

    op.create_table(
        "notification",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("icon", sa.String(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("target_url", sa.String(), nullable=False),
        sa.Column("reference_id", sa.String(), nullable=False),
        sa.Column("reference_type", sa.String(), nullable=False),
        sa.Column("unique_key", sa.String(), nullable=False, server_default="0"),
        sa.Column("public", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("read_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "type", "reference_id", "unique_key", name="uq_notification_reference"),
    )
    op.create_index("ix_notification_user_id", "notification", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_notification_user_id", table_name="notification")
    op.drop_table("notification")
    op.drop_table("post_mention")
    op.drop_index("ix_post_keyword_keyword", table_name="post_keyword")
    op.drop_table("post_keyword")
    op.drop_index("idx_keyword_status_occurrences", table_name="keyword")
    op.drop_table("keyword")
    op.drop_index("ix_post_source_id", table_name="post")
    op.drop_index("ix_post_short_id", table_name="post")
    op.drop_table("post")
    op.drop_index("ix_user_username", table_name="user")
    op.drop_table("user")
    op.drop_index("ix_source_handle", table_name="source")
    op.drop_table("source")
