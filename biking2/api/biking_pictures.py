"""Biking pictures proxy endpoints for the DailyFratze photo blog."""

import httpx
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from biking2.core.deps import DailyFratze

router = APIRouter()


def _relay(response: httpx.Response, default_media_type: str) -> StreamingResponse:
    """Stream an upstream response back to the client and close it afterwards."""
    return StreamingResponse(
        response.aiter_bytes(),
        status_code=response.status_code,
        media_type=response.headers.get("Content-Type", default_media_type),
        background=BackgroundTask(response.aclose),
    )


@router.get("/feed")
async def get_biking_pictures_feed(provider: DailyFratze) -> StreamingResponse:
    """Proxy the biking pictures RSS feed."""
    response = await provider.get_rss_connection()
    if response is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="DailyFratze feed unavailable",
        )
    return _relay(response, "application/rss+xml")


@router.get("/{picture_id:int}.jpg")
async def get_biking_picture(picture_id: int, provider: DailyFratze) -> StreamingResponse:
    """
    Proxy a single biking picture.

    - **picture_id**: DailyFratze image id
    """
    response = await provider.get_image_connection(picture_id)
    if response is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="DailyFratze image unavailable",
        )
    return _relay(response, "image/jpeg")
