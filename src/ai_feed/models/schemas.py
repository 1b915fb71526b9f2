## `ai_feed/models/schemas.py`

from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

SOURCE = "drupal"


class CanonicalRecord(BaseModel):
    """
    One feed entry, built fresh per request and never mutated.

    Fields serialize under camelCase aliases (``documentType``, ``dateCreated``...)
    in declaration order.
    """

    id: str
    source: str = SOURCE
    document_type: str
    document_id: int
    document_title: str
    document_url: str
    document_content: str
    meta_tags: str = ""
    meta_description: str = ""
    date_created: str
    date_modified: str
    date_processed: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    timestamp: datetime
