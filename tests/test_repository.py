"""
Tests for the SQLAlchemy content repository and the Node entity.

Each test gets its own in-memory SQLite database.
"""

from zoneinfo import ZoneInfo

import pytest
import pytest_asyncio

from ai_feed.database.models import NOT_PUBLISHED, PUBLISHED, Node
from ai_feed.services.database_service import DatabaseService
from ai_feed.services.renderer import JinjaDisplayRenderer
from ai_feed.services.repository import ContentEntity, SqlContentRepository
from ai_feed.services.sources import ContentSource

from fakes import CHANGED_TS, CREATED_TS


def make_node(nid, status=PUBLISHED, anonymous_access=True, **kwargs):
    values = {
        "type": "page",
        "title": f"Node {nid}",
        "body": f"<p>Body {nid}</p>",
        "created": CREATED_TS,
        "changed": CHANGED_TS,
    }
    values.update(kwargs)
    return Node(nid=nid, status=status, anonymous_access=anonymous_access, **values)


@pytest_asyncio.fixture
async def db():
    service = DatabaseService("sqlite+aiosqlite://")
    await service.init_db()
    yield service
    await service.close()


async def seed(db, nodes):
    async with db.get_session() as session:
        session.add_all(nodes)


class TestSqlContentRepository:
    @pytest.mark.asyncio
    async def test_only_published_and_anonymous_ids(self, db):
        await seed(db, [
            make_node(1),
            make_node(2, status=NOT_PUBLISHED),
            make_node(3, anonymous_access=False),
            make_node(4, status=NOT_PUBLISHED, anonymous_access=False),
            make_node(5),
        ])

        async with db.get_session() as session:
            ids = await SqlContentRepository(session).query_published_ids()

        assert ids == [1, 5]

    @pytest.mark.asyncio
    async def test_empty_table(self, db):
        async with db.get_session() as session:
            repo = SqlContentRepository(session)
            assert await repo.query_published_ids() == []
            assert await repo.load_multiple([]) == []

    @pytest.mark.asyncio
    async def test_load_multiple_keeps_requested_order(self, db):
        await seed(db, [make_node(1), make_node(2), make_node(3)])

        async with db.get_session() as session:
            nodes = await SqlContentRepository(session).load_multiple([3, 1, 42, 2])

        assert [n.nid for n in nodes] == [3, 1, 2]
        assert all(isinstance(n, ContentEntity) for n in nodes)


class TestNode:
    def test_entity_capabilities(self):
        node = make_node(18, title="Resources and Workshops")
        assert node.entity_type_id == "node"
        assert node.id == 18
        assert node.bundle == "page"
        assert node.label == "Resources and Workshops"

    def test_canonical_url_prefers_alias(self):
        node = make_node(18, path_alias="/resource")
        assert node.canonical_url("https://yalesites.yale.edu/") == "https://yalesites.yale.edu/resource"

    def test_canonical_url_without_alias(self):
        assert make_node(18).canonical_url("https://yalesites.yale.edu") == "https://yalesites.yale.edu/node/18"

    def test_canonical_url_alias_without_leading_slash(self):
        node = make_node(18, path_alias="about/us")
        assert node.canonical_url("http://localhost:8000") == "http://localhost:8000/about/us"


class TestFeedFromDatabase:
    @pytest.mark.asyncio
    async def test_records_for_eligible_nodes_only(self, db):
        await seed(db, [
            make_node(18, title="Resources and Workshops", path_alias="/resource"),
            make_node(19, status=NOT_PUBLISHED),
            make_node(20, anonymous_access=False),
        ])

        async with db.get_session() as session:
            source = ContentSource(
                SqlContentRepository(session),
                JinjaDisplayRenderer(),
                ZoneInfo("UTC"),
                lambda: 1706025938,
            )
            records = await source.fetch_all(host="yalesites.yale.edu", base_url="https://yalesites.yale.edu")

        assert len(records) == 1
        record = records[0]
        assert record.id == "yalesites-yale-edu-node-18"
        assert record.document_type == "node/page"
        assert record.document_id == 18
        assert record.document_title == "Resources and Workshops"
        assert record.document_url == "https://yalesites.yale.edu/resource"
        assert "<p>Body 18</p>" in record.document_content
        assert record.date_created == "2023-10-12T16:09:21+00:00"
        assert record.date_modified == "2023-11-30T16:11:18+00:00"
        assert record.date_processed == "2024-01-23T16:05:38+00:00"


class TestDatabaseService:
    @pytest.mark.asyncio
    async def test_health_check_connected(self, db):
        health = await db.health_check()
        assert health["status"] == "healthy"
        assert health["connected"] is True
        assert health["database_type"] == "sqlite"

    @pytest.mark.asyncio
    async def test_init_db_is_idempotent(self, db):
        await db.init_db()
        await seed(db, [make_node(1)])
        await db.init_db()
        async with db.get_session() as session:
            assert await SqlContentRepository(session).query_published_ids() == [1]

    @pytest.mark.asyncio
    async def test_session_rolls_back_on_error(self, db):
        with pytest.raises(ValueError):
            async with db.get_session() as session:
                session.add(make_node(7))
                await session.flush()
                raise ValueError("boom")

        async with db.get_session() as session:
            assert await SqlContentRepository(session).query_published_ids() == []
