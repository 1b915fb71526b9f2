# ai_feed/services/sources.py
"""
Feed sources service.

Queries the content repository for published, anonymously readable items and
normalizes each one into a ``CanonicalRecord`` for the JSON feed consumed by a
language model integration framework.

The request context (host header and base URL) is passed in explicitly; the
repository and renderer are injected at construction.

Usage:
    source = ContentSource(SqlContentRepository(session), JinjaDisplayRenderer())
    records = await source.fetch_all(host="ask.yale.edu", base_url="https://ask.yale.edu")
"""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime, tzinfo
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from ..config import settings
from ..models.schemas import SOURCE, CanonicalRecord
from .renderer import DEFAULT_VIEW_MODE, DisplayRenderer
from .repository import ContentEntity, ContentRepository

logger = logging.getLogger("ai_feed.sources")

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def format_timestamp(timestamp: int, tz: tzinfo) -> str:
    """Format epoch seconds as ISO-8601 with a ``+HH:MM`` offset, e.g. 2023-10-12T16:09:21+00:00."""
    return datetime.fromtimestamp(int(timestamp), tz).isoformat(timespec="seconds")


def get_search_index_id(entity: ContentEntity, host: str) -> str:
    """
    Predictable, unique id to reference an item in the search index.

    Examples: "ask-yale-edu-node-14" or "hospitality-yale-edu-media-128".
    """
    prefix = _NON_ALNUM.sub("-", host or "")
    return f"{prefix}-{entity.entity_type_id}-{entity.id}"


def get_document_type(entity: ContentEntity) -> str:
    """Entity type plus bundle when present: "node/post", "media/image" or "user"."""
    doc_type = entity.entity_type_id
    if entity.bundle:
        doc_type += "/" + entity.bundle
    return doc_type


class ContentSource:
    """
    Builds the canonical records for every eligible content item.

    Args:
        repository: Content repository to query and load items from
        renderer: Display renderer producing the document content markup
        timezone: Timezone for the date fields (defaults to the site timezone)
        clock: Returns the current time in epoch seconds, used for dateProcessed
    """

    def __init__(
        self,
        repository: ContentRepository,
        renderer: DisplayRenderer,
        timezone: Optional[tzinfo] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.repository = repository
        self.renderer = renderer
        self.timezone = timezone or ZoneInfo(settings.site_timezone)
        self.clock = clock

    async def fetch_all(self, host: str, base_url: str) -> List[CanonicalRecord]:
        """
        Fetch all published items that anonymous users can view.

        Any repository, URL or rendering failure propagates and aborts the
        whole fetch; no partial result is returned.
        """
        ids = await self.repository.query_published_ids()
        logger.debug(f"Found {len(ids)} eligible items")
        entities = await self.repository.load_multiple(ids)
        return [self.build_record(entity, host, base_url) for entity in entities]

    def build_record(self, entity: ContentEntity, host: str, base_url: str) -> CanonicalRecord:
        return CanonicalRecord(
            id=get_search_index_id(entity, host),
            source=SOURCE,
            document_type=get_document_type(entity),
            document_id=entity.id,
            document_title=entity.label,
            document_url=entity.canonical_url(base_url),
            document_content=self.renderer.render(entity, DEFAULT_VIEW_MODE),
            meta_tags="",
            meta_description="",
            date_created=format_timestamp(entity.created, self.timezone),
            date_modified=format_timestamp(entity.changed, self.timezone),
            date_processed=format_timestamp(self.clock(), self.timezone),
        )
