"""content graph schema

Revision ID: 5b1e0c7a9d2f
Revises:
Create Date: 2026-10-19 09:12:41.318204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5b1e0c7a9d2f"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")
VISIBILITY = sa.Enum("PUBLIC", "PRIVATE", "FOLLOWERS", name="post_visibility")
MENTION_TARGET = sa.Enum("POST", "COMMENT", name="mention_target")


def upgrade() -> None:
    """Create users, follows, posts, hashtags, post links and mentions."""
    op.create_table(
        "app_user",
        sa.Column("id", ID, autoincrement=True, nullable=False),
        sa.Column("display_name", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("display_name"),
    )
    op.create_table(
        "follow",
        sa.Column("id", ID, autoincrement=True, nullable=False),
        sa.Column("follower_id", ID, nullable=False),
        sa.Column("followee_id", ID, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("follower_id <> followee_id", name="ck_follow_not_self"),
        sa.ForeignKeyConstraint(["follower_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["followee_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower_id", "followee_id", name="uq_follow_pair"),
    )
    op.create_index("ix_follow_followee_id", "follow", ["followee_id"])

    op.create_table(
        "post",
        sa.Column("id", ID, autoincrement=True, nullable=False),
        sa.Column("author_id", ID, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("visibility", VISIBILITY, nullable=False),
        sa.Column("view_count", sa.Integer(), nullable=False),
        sa.Column("like_count", sa.Integer(), nullable=False),
        sa.Column("comment_count", sa.Integer(), nullable=False),
        sa.Column("deleted", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("view_count >= 0", name="ck_post_view_count"),
        sa.CheckConstraint("like_count >= 0", name="ck_post_like_count"),
        sa.CheckConstraint("comment_count >= 0", name="ck_post_comment_count"),
        sa.ForeignKeyConstraint(["author_id"], ["app_user.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_post_author_created", "post", ["author_id", "created_at"])
    op.create_index("ix_post_created_at", "post", ["created_at"])

    op.create_table(
        "hashtag",
        sa.Column("id", ID, autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("usage_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("usage_count >= 0", name="ck_hashtag_usage_count"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_hashtag_usage_count", "hashtag", ["usage_count"])

    op.create_table(
        "post_hashtag",
        sa.Column("post_id", ID, nullable=False),
        sa.Column("hashtag_id", ID, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["hashtag_id"], ["hashtag.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "hashtag_id"),
    )
    op.create_index("ix_post_hashtag_hashtag_id", "post_hashtag", ["hashtag_id"])

    op.create_table(
        "mention",
        sa.Column("id", ID, autoincrement=True, nullable=False),
        sa.Column("user_id", ID, nullable=False),
        sa.Column("author_id", ID, nullable=False),
        sa.Column("target_type", MENTION_TARGET, nullable=False),
        sa.Column("target_id", ID, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "target_type", "target_id", name="uq_mention_target"),
    )
    op.create_index("ix_mention_target", "mention", ["target_type", "target_id"])
    op.create_index("ix_mention_user_created", "mention", ["user_id", "created_at"])


def downgrade() -> None:
    """Drop the content graph schema."""
    op.drop_table("mention")
    op.drop_table("post_hashtag")
    op.drop_table("hashtag")
    op.drop_table("post")
    op.drop_table("follow")
    op.drop_table("app_user")
    MENTION_TARGET.drop(op.get_bind(), checkfirst=True)
    VISIBILITY.drop(op.get_bind(), checkfirst=True)
