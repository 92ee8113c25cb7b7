"""RSS item projections."""

from pydantic import BaseModel


class Content(BaseModel):
    """
    Content of an RSS item: a category and the URL it points to.

    Projection handed to consumers of the DailyFratze feed.
    """

    type: str | None = None
    url: str | None = None

    model_config = {"frozen": True}
