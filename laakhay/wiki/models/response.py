"""Wire model for a MediaWiki `list=allpages` response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .page import PageInfo


class ContinueBlock(BaseModel):
    """Pointer to the next page of results."""

    apcontinue: str | None = None

    model_config = ConfigDict(extra="allow")


class QueryBlock(BaseModel):
    allpages: list[PageInfo] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class AllPagesResponse(BaseModel):
    """Parsed body of one allpages request.

    `continue` is absent on the last page. A body carrying a MediaWiki
    `error` object, or no `query` block at all, is rejected.
    """

    continue_: ContinueBlock | None = Field(default=None, alias="continue")
    query: QueryBlock

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def reject_api_error(cls, data: Any) -> Any:
        """Turn MediaWiki error envelopes into validation failures."""
        if isinstance(data, dict) and "error" in data:
            error = data["error"]
            code = error.get("code", "unknown") if isinstance(error, dict) else error
            raise ValueError(f"API returned error: {code}")
        return data

    @property
    def pages(self) -> list[PageInfo]:
        return self.query.allpages

    @property
    def next_token(self) -> str | None:
        """Continuation token for the next batch, None on the final page."""
        if self.continue_ is None:
            return None
        return self.continue_.apcontinue or None
