import logging
import time
from typing import Any, Dict

from shopreviews.core.errors import SourceError
from shopreviews.domain.repositories.review_store import ReviewStore
from shopreviews.domain.sources.port import ReviewSource

logger = logging.getLogger(__name__)

async def ingest_product_reviews(
    store: ReviewStore,
    source: ReviewSource,
    product_id: int,
) -> Dict[str, Any]:
    """
    Pull a product's reviews from `source` into `store`.
    Reviews already stored under the same (source, external_id) are skipped,
    so running it twice inserts nothing the second time.
    """
    t0 = time.perf_counter()
    logger.info("ingest start product_id=%s source=%s", product_id, source.name)

    try:
        external = await source.fetch(product_id)
    except SourceError:
        raise
    except Exception as e:
        raise SourceError(f"Review source '{source.name}' failed: {e}") from e

    inserted = skipped = 0
    for item in external:
        if await store.has_external(item.source, item.review_id):
            skipped += 1
            continue
        await store.insert(item.to_draft(product_id))
        inserted += 1

    logger.info(
        "ingest done product_id=%s fetched=%s inserted=%s skipped=%s time=%.3fs",
        product_id, len(external), inserted, skipped, time.perf_counter() - t0,
    )
    return {"product_id": product_id, "fetched": len(external), "inserted": inserted, "skipped": skipped}
