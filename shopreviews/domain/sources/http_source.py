"""HTTP review source: client for an external scraper service.

Expects `GET {base_url}/reviews/{product_id}` to answer with either a JSON
list of reviews or an object grouping lists by retailer
(`{"amazon": [...], "bestbuy": [...]}`). A 404 means "no reviews".
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from shopreviews.core.errors import SourceError
from shopreviews.domain.models.review import ExternalReview
from shopreviews.domain.sources.port import ReviewSource

logger = logging.getLogger(__name__)


def _flatten(payload: Any) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        if isinstance(payload.get("data"), (list, dict)):
            return _flatten(payload["data"])
        items: list = []
        for group in payload.values():
            if isinstance(group, list):
                items.extend(group)
        return items
    raise SourceError(f"Unexpected review payload type: {type(payload).__name__}")


class HttpReviewSource(ReviewSource):

    name = "http"

    def __init__(self, base_url: str, timeout_s: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        if not base_url and client is None:
            raise ValueError("HttpReviewSource needs a base_url")
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout_s)

    async def fetch(self, product_id: int) -> list[ExternalReview]:
        try:
            resp = await self._client.get(f"/reviews/{product_id}")
        except httpx.HTTPError as e:
            raise SourceError(f"Review source unreachable: {e}") from e

        if resp.status_code == 404:
            return []
        if resp.is_error:
            raise SourceError(f"Review source answered {resp.status_code} for product {product_id}")

        try:
            raw = _flatten(resp.json())
            items = [ExternalReview.model_validate(x) for x in raw]
        except (ValueError, PydanticValidationError) as e:
            raise SourceError(f"Invalid payload from review source: {e}") from e

        logger.debug("http_source fetched product_id=%s items=%s", product_id, len(items))
        return items

    async def aclose(self) -> None:
        await self._client.aclose()
