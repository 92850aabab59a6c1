from shopreviews.core.config import Settings
from shopreviews.domain.sources.http_source import HttpReviewSource
from shopreviews.domain.sources.memory_source import MemoryReviewSource
from shopreviews.domain.sources.port import ReviewSource


def build_review_source(settings: Settings) -> ReviewSource:
    """Pick the review source adapter named by REVIEW_SOURCE."""
    if settings.REVIEW_SOURCE == "memory":
        return MemoryReviewSource()
    if settings.REVIEW_SOURCE == "http":
        return HttpReviewSource(settings.REVIEW_SOURCE_URL, timeout_s=settings.review_source_timeout_s)
    raise ValueError(f"Unknown review source: {settings.REVIEW_SOURCE}")
