# ai_feed/services/renderer.py
"""
Display rendering for content entities.

Turns an entity into display markup using Jinja2 templates selected by
entity type, bundle and view mode. Template candidates, first match wins:

    {entity_type}--{bundle}--{view_mode}.html
    {entity_type}--{view_mode}.html
    entity--{view_mode}.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Protocol, Union

from jinja2 import BaseLoader, Environment, FileSystemLoader, select_autoescape

from ..config import settings
from .repository import ContentEntity

logger = logging.getLogger("ai_feed.renderer")

DEFAULT_VIEW_MODE = "default"


class DisplayRenderer(Protocol):
    def render(self, entity: ContentEntity, view_mode: str = DEFAULT_VIEW_MODE) -> str: ...


class JinjaDisplayRenderer:
    """
    Renders entities with Jinja2 display templates.

    Args:
        template_dir: Directory holding the display templates. Defaults to
            ``settings.template_path``.
        loader: Alternative Jinja2 loader; takes precedence over template_dir.
    """

    def __init__(
        self,
        template_dir: Optional[Union[str, Path]] = None,
        loader: Optional[BaseLoader] = None,
    ):
        if loader is None:
            loader = FileSystemLoader(str(template_dir or settings.template_path))
        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"]),
        )

    @staticmethod
    def template_candidates(entity: ContentEntity, view_mode: str) -> List[str]:
        entity_type = entity.entity_type_id
        names = []
        if entity.bundle:
            names.append(f"{entity_type}--{entity.bundle}--{view_mode}.html")
        names.append(f"{entity_type}--{view_mode}.html")
        names.append(f"entity--{view_mode}.html")
        return names

    def render(self, entity: ContentEntity, view_mode: str = DEFAULT_VIEW_MODE) -> str:
        """
        Render an entity in the given view mode.

        Raises:
            jinja2.TemplatesNotFound: No candidate template exists.
        """
        template = self.env.select_template(self.template_candidates(entity, view_mode))
        logger.debug(f"Rendering {entity.entity_type_id}:{entity.id} with {template.name}")
        return template.render(entity=entity, view_mode=view_mode, label=entity.label)
