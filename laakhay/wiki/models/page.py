"""Page descriptor data model."""

from pydantic import BaseModel, ConfigDict, Field


class PageInfo(BaseModel):
    """One entry of an allpages listing.

    Only `title` is guaranteed; provider fields such as `pageid` and `ns`
    are kept as extra attributes.
    """

    title: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, extra="allow")
