"""Bookmark model for storing text snippets with request provenance."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, CreatedAtMixin


class Bookmark(Base, CreatedAtMixin):
    """Bookmark model - stores submitted text with client address, agent and device hash."""

    __tablename__ = "bookmarks"

    id: Mapped[int] = mapped_column(primary_key=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    user_agent: Mapped[str] = mapped_column(Text, nullable=False, default="")
    ip_address: Mapped[str] = mapped_column(Text, nullable=False)
    device_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        comment="sha256(ip_address + user_agent); grouping key, not unique",
    )
