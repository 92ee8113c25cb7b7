"""DailyFratze integration for the biking pictures RSS feed and images."""

import httpx
from loguru import logger

from biking2.core.config import (
    DAILYFRATZE_IMAGE_URL_FORMAT,
    DAILYFRATZE_RSS_URL,
    Settings,
)

IMAGE_SIZE = "s"


class DailyFratzeProvider:
    """
    Opens connections to the DailyFratze photo blog.

    Connections are streamed ``httpx.Response`` objects owned by the caller,
    who must ``aclose()`` them. Transport failures are logged and reported
    as ``None``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        access_token: str,
        image_url_format: str = DAILYFRATZE_IMAGE_URL_FORMAT,
        rss_url: str = DAILYFRATZE_RSS_URL,
    ):
        self.client = client
        self.access_token = access_token
        self.image_url_format = image_url_format
        self.rss_url = rss_url

    async def get_rss_connection(self, url: str | None = None) -> httpx.Response | None:
        """Open a connection to the RSS feed at url or the default feed."""
        target = url or self.rss_url
        try:
            request = self.client.build_request("GET", target)
            return await self.client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to open connection to DailyFratze RSS endpoint {target}: {e}")
            return None

    async def get_image_connection(self, id: int) -> httpx.Response | None:
        """Open an authenticated connection to the image with the given id."""
        url = self.image_url_format.format(size=IMAGE_SIZE, id=id)
        try:
            request = self.client.build_request(
                "GET",
                url,
                headers={"Authorization": f"Bearer {self.access_token}"},
            )
            return await self.client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to open secure connection to DailyFratze image api: {e}")
            return None


def build_daily_fratze_provider(
    settings: Settings, client: httpx.AsyncClient
) -> DailyFratzeProvider | None:
    """Create the provider if an access token is configured."""
    if not settings.dailyfratze_enabled:
        logger.info("DailyFratze access token not configured - integration disabled")
        return None

    logger.info("DailyFratze integration enabled")
    return DailyFratzeProvider(
        client,
        settings.dailyfratze_access_token,
        image_url_format=settings.dailyfratze_image_url_format,
        rss_url=settings.dailyfratze_rss_url,
    )
