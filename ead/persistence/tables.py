"""SQLAlchemy table definitions for the moderation notes store.

Comments themselves live in the school backend; only moderator notes are
stored locally.
"""

from sqlalchemy import Column, DateTime, MetaData, String, Table, Text

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENT NOTES TABLE (one private note per backend comment)
# ============================================================================
comment_notes_table = Table(
    "comment_notes",
    metadata,
    Column("comment_id", String(64), primary_key=True),  # Backend comment id
    Column("text", Text, nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)
