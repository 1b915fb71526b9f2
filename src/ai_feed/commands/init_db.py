"""
Database initialization command.

Creates the content repository tables and optionally loads sample content.

Usage:
    python -m ai_feed.commands.init_db
    python -m ai_feed.commands.init_db --sample
    python -m ai_feed.commands.init_db --database-url sqlite+aiosqlite:///./data/demo.db --sample
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from sqlalchemy import select

from ..database.models import NOT_PUBLISHED, PUBLISHED, Node
from ..services.database_service import DatabaseService

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def sample_nodes() -> List[Node]:
    """One feedable page plus one unpublished and one restricted node."""
    return [
        Node(
            nid=18,
            type="page",
            title="Resources and Workshops",
            body="<p>Workshops, office hours and self-paced resources.</p>",
            status=PUBLISHED,
            anonymous_access=True,
            path_alias="/resource",
            created=1697126961,
            changed=1701360678,
        ),
        Node(
            nid=19,
            type="post",
            title="Draft announcement",
            body="<p>Not ready yet.</p>",
            status=NOT_PUBLISHED,
            anonymous_access=True,
            created=1697126961,
            changed=1697126961,
        ),
        Node(
            nid=20,
            type="page",
            title="Staff intranet",
            body="<p>Members only.</p>",
            status=PUBLISHED,
            anonymous_access=False,
            path_alias="/intranet",
            created=1697126961,
            changed=1697126961,
        ),
    ]


async def init_db(database_url: Optional[str], sample: bool) -> int:
    db = DatabaseService(database_url)
    try:
        await db.init_db()
        if sample:
            inserted = 0
            async with db.get_session() as session:
                for node in sample_nodes():
                    existing = await session.execute(select(Node.nid).where(Node.nid == node.nid))
                    if existing.scalar_one_or_none() is not None:
                        logger.info(f"Node {node.nid} already exists, skipping")
                        continue
                    session.add(node)
                    inserted += 1
            logger.info(f"Inserted {inserted} sample nodes")
    finally:
        await db.close()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create the content tables for the AI feed")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    parser.add_argument("--sample", action="store_true", help="Load sample content")
    args = parser.parse_args(argv)
    return asyncio.run(init_db(args.database_url, args.sample))


if __name__ == "__main__":
    sys.exit(main())
