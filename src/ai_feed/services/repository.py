# ai_feed/services/repository.py
"""
Content repository access.

The feed only needs two capabilities from the repository: the ids of items
that are published and readable by anonymous users, and a bulk load of those
items. Any item kind that exposes the ``ContentEntity`` capability set can be
fed through the same code path.
"""

from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.models import PUBLISHED, Node


@runtime_checkable
class ContentEntity(Protocol):
    """Capabilities every content item exposes to the feed."""

    entity_type_id: str

    @property
    def id(self) -> int: ...

    @property
    def bundle(self) -> str: ...

    @property
    def label(self) -> str: ...

    @property
    def created(self) -> int: ...

    @property
    def changed(self) -> int: ...

    def canonical_url(self, base_url: str) -> str: ...


class ContentRepository(Protocol):
    """Query and load interface of the content repository."""

    async def query_published_ids(self) -> List[int]: ...

    async def load_multiple(self, ids: Sequence[int]) -> List[ContentEntity]: ...


class SqlContentRepository:
    """ContentRepository backed by the ``node`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def query_published_ids(self) -> List[int]:
        """Ids of published nodes that anonymous users may view."""
        stmt = (
            select(Node.nid)
            .where(Node.status == PUBLISHED)
            .where(Node.anonymous_access.is_(True))
            .order_by(Node.nid)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def load_multiple(self, ids: Sequence[int]) -> List[ContentEntity]:
        """Load nodes by id, in the order given. Unknown ids are skipped."""
        if not ids:
            return []
        result = await self.session.execute(select(Node).where(Node.nid.in_(list(ids))))
        by_id = {node.nid: node for node in result.scalars().all()}
        return [by_id[i] for i in ids if i in by_id]
