import os

import pytest

# Point the app at a private in-memory database before importing app modules.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "true")
os.environ.setdefault("SITE_TIMEZONE", "UTC")

from fakes import FakeEntity  # noqa: E402


@pytest.fixture
def page_node():
    return FakeEntity(
        entity_type_id="node",
        id=18,
        label="Resources and Workshops",
        bundle="page",
        path="/resource",
        body="<p>Workshops, office hours and self-paced resources.</p>",
    )


@pytest.fixture
def fixed_clock():
    # 2024-01-23T16:05:38+00:00
    return lambda: 1706025938
