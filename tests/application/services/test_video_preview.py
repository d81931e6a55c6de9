"""Unit tests for VideoPreview (latest request wins)"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from gistfolio.application.interfaces import VideoMetadata
from gistfolio.application.services import VideoPreview
from gistfolio.domain.exceptions import VideoNotFoundError


def metadata(video_id: str) -> VideoMetadata:
    return VideoMetadata(id=video_id, title=f"Title {video_id}", thumbnail_url=f"https://t/{video_id}.jpg")


@pytest.mark.asyncio
async def test_request_sets_data(mock_video_provider):
    mock_video_provider.fetch_metadata = AsyncMock(return_value=metadata("a"))
    preview = VideoPreview(mock_video_provider)

    result = await preview.request("a")

    assert result == metadata("a")
    assert preview.data == metadata("a")
    assert preview.error is None
    assert preview.is_loading is False


@pytest.mark.asyncio
async def test_empty_reference_clears_without_request(mock_video_provider):
    mock_video_provider.fetch_metadata = AsyncMock(return_value=metadata("a"))
    preview = VideoPreview(mock_video_provider)
    await preview.request("a")

    assert await preview.request("") is None

    assert preview.data is None
    assert mock_video_provider.fetch_metadata.await_count == 1


@pytest.mark.asyncio
async def test_error_clears_data(mock_video_provider):
    mock_video_provider.fetch_metadata = AsyncMock(side_effect=VideoNotFoundError("youtube", "zzz"))
    preview = VideoPreview(mock_video_provider)

    assert await preview.request("zzz") is None

    assert preview.data is None
    assert preview.error == "youtube video not found: zzz"
    assert preview.is_loading is False


@pytest.mark.asyncio
async def test_slow_earlier_response_is_dropped(mock_video_provider):
    """
    GIVEN a slow lookup for "old" followed by a fast lookup for "new"
    WHEN the "old" response arrives last
    THEN the preview still shows "new"
    """
    release_old = asyncio.Event()

    async def fetch(video_ref):
        if video_ref == "old":
            await release_old.wait()
        return metadata(video_ref)

    mock_video_provider.fetch_metadata = AsyncMock(side_effect=fetch)
    preview = VideoPreview(mock_video_provider)

    old = asyncio.create_task(preview.request("old"))
    await asyncio.sleep(0)
    await preview.request("new")
    release_old.set()

    assert await old is None
    assert preview.data == metadata("new")
    assert preview.is_loading is False


@pytest.mark.asyncio
async def test_refetch_repeats_last_reference(mock_video_provider):
    mock_video_provider.fetch_metadata = AsyncMock(return_value=metadata("a"))
    preview = VideoPreview(mock_video_provider)
    await preview.request("a")

    await preview.refetch()

    assert mock_video_provider.fetch_metadata.await_count == 2
    mock_video_provider.fetch_metadata.assert_awaited_with("a")
