"""Shared test fixtures for pytest"""
import json
from unittest.mock import AsyncMock

import pytest

from gistfolio.application.services import AdminStore
from gistfolio.domain.entities import Document
from gistfolio.infrastructure.session import InMemorySessionHolder

GIST_ID = "abc123"
FILE_NAME = "projects-config.json"
OWNER_ID = 42


def make_entry(entry_id: int, is_featured: bool = False, **fields) -> dict:
    """Raw stored entry (camelCase, as found in the gist file)"""
    entry = {
        "id": entry_id,
        "title": f"Project {entry_id}",
        "client": "Client",
        "description": "",
        "category": "Music Video",
        "youtubeId": "dQw4w9WgXcQ",
        "thumbnailUrl": f"https://img.example.com/{entry_id}.jpg",
        "isFeatured": is_featured,
    }
    entry.update(fields)
    return entry


def gist_payload(config: dict | None, owner_id: int = OWNER_ID, **file_fields) -> dict:
    """GitHub gist API response wrapping one config file"""
    files = {}
    if config is not None:
        files[FILE_NAME] = {
            "filename": FILE_NAME,
            "content": json.dumps(config),
            "truncated": False,
            **file_fields,
        }
    return {
        "id": GIST_ID,
        "owner": {"id": owner_id, "login": "owner"},
        "files": files,
        "updated_at": "2026-01-02T03:04:05Z",
        "html_url": f"https://gist.github.com/{GIST_ID}",
    }


@pytest.fixture
def sample_config():
    """Stored document with two entries, about and settings"""
    return {
        "projects": [make_entry(1), make_entry(2)],
        "about": {
            "title": "About",
            "description": "Director",
            "bio": "Bio",
            "skills": ["Editing", "Color"],
            "email": "me@example.com",
            "instagram": "@me",
            "youtube": "@me",
        },
        "global": {"accentMode": "custom", "customColor": "#112233"},
    }


@pytest.fixture
def sample_document(sample_config):
    return Document.model_validate(sample_config)


@pytest.fixture
def mock_document_store(sample_document):
    """Document store that accepts any token and serves sample_document"""
    store = AsyncMock()
    store.verify_permission = AsyncMock(return_value=True)
    store.fetch_document = AsyncMock(return_value=sample_document)
    store.persist_document = AsyncMock()
    return store


@pytest.fixture
def session_holder():
    return InMemorySessionHolder()


@pytest.fixture
def mock_video_provider():
    provider = AsyncMock()
    provider.name = "youtube"
    return provider


@pytest.fixture
def admin_store(mock_document_store, session_holder, mock_video_provider):
    return AdminStore(
        document_store=mock_document_store,
        session_holder=session_holder,
        video_provider=mock_video_provider,
    )


@pytest.fixture
async def authenticated_store(admin_store):
    result = await admin_store.login("good-token")
    assert result.ok
    return admin_store
