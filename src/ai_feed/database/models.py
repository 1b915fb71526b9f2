# ai_feed/database/models.py
"""
SQLAlchemy ORM models for the content repository.

Models:
    - Node: A content item (page, article, ...) with publishing state,
      anonymous visibility and an optional path alias.

Timestamps are stored as integer seconds since the epoch, which is what the
feed formats into ISO-8601 strings.
"""

from __future__ import annotations

import time

from sqlalchemy import Boolean, Column, Index, Integer, SmallInteger, String, Text

from .base import Base

NOT_PUBLISHED = 0
PUBLISHED = 1


def _now() -> int:
    return int(time.time())


class Node(Base):
    """
    Node content entity.

    Implements the ``ContentEntity`` capability set used by the feed:
    ``id``, ``entity_type_id``, ``bundle``, ``label``, ``created``,
    ``changed`` and ``canonical_url()``.

    Attributes:
        nid: Repository-assigned identifier
        type: Bundle name (e.g. "page", "post")
        title: Human-readable label
        body: Body markup (HTML)
        status: PUBLISHED or NOT_PUBLISHED
        anonymous_access: Whether anonymous users may view the node
        path_alias: Optional URL alias such as "/resource"
        created: Creation time (epoch seconds)
        changed: Last modification time (epoch seconds)
    """

    __tablename__ = "node"

    entity_type_id = "node"

    nid = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(32), nullable=False, default="page", index=True)
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=True)
    status = Column(SmallInteger, nullable=False, default=PUBLISHED)
    anonymous_access = Column(Boolean, nullable=False, default=True)
    path_alias = Column(String(255), nullable=True)
    created = Column(Integer, nullable=False, default=_now)
    changed = Column(Integer, nullable=False, default=_now, onupdate=_now)

    __table_args__ = (
        Index("ix_node_status_access", "status", "anonymous_access"),
    )

    @property
    def id(self) -> int:
        return self.nid

    @property
    def bundle(self) -> str:
        return self.type or ""

    @property
    def label(self) -> str:
        return self.title

    def canonical_url(self, base_url: str) -> str:
        """Absolute canonical URL, preferring the path alias over /node/{nid}."""
        path = self.path_alias or f"/node/{self.nid}"
        if not path.startswith("/"):
            path = "/" + path
        return base_url.rstrip("/") + path

    def __repr__(self) -> str:
        return f"<Node(nid={self.nid}, type={self.type}, status={self.status})>"
