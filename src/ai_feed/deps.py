from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .database.base import get_db
from .services.database_service import DatabaseService, database_service
from .services.renderer import DisplayRenderer, JinjaDisplayRenderer
from .services.repository import SqlContentRepository
from .services.sources import ContentSource

_renderer = JinjaDisplayRenderer()

def get_database() -> DatabaseService:
    return database_service

def get_renderer() -> DisplayRenderer:
    return _renderer

def get_content_source(
    db: AsyncSession = Depends(get_db),
    renderer: DisplayRenderer = Depends(get_renderer),
) -> ContentSource:
    return ContentSource(SqlContentRepository(db), renderer)
