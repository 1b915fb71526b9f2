# ai_feed/routers/content.py
"""
AI feed endpoint.

    GET /api/ai/v1/content

Returns every published, anonymously readable content item as a flat JSON
array of canonical records for search/embedding ingestion.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from ..deps import get_content_source
from ..models.schemas import CanonicalRecord
from ..services.sources import ContentSource

logger = logging.getLogger("ai_feed.api.content")

router = APIRouter(prefix="/api/ai/v1", tags=["feed"])


@router.get("/content", response_model=List[CanonicalRecord])
async def content_feed(request: Request, source: ContentSource = Depends(get_content_source)):
    """
    Returns content and metadata as a JSON array.

    The request host and base URL are handed to the source explicitly; they
    drive the record ids and the absolute canonical URLs. Collaborator
    failures are not caught here and surface as 500 responses.
    """
    host = request.headers.get("host", "")
    base_url = str(request.base_url).rstrip("/")
    records = await source.fetch_all(host=host, base_url=base_url)
    logger.info(f"Serving {len(records)} feed records for host '{host}'")
    return records
