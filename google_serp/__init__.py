"""google-serp: Google search result scraping for asyncio."""

from loguru import logger

from .context import CancelToken
from .domains import GOOGLE_DOMAINS, base_url
from .errors import (
    Blocked,
    Cancelled,
    DeadlineExceeded,
    GoogleSearchError,
    SearchError,
    TransportError,
)
from .extract import extract_results
from .ratelimit import RateLimiter, default_limiter
from .search import GoogleSearch, search
from .types import DEFAULT_USER_AGENT, Result, SearchOptions
from .urls import build_url

logger.disable("google_serp")

__all__ = [
    "GoogleSearch",
    "search",
    "build_url",
    "base_url",
    "extract_results",
    "GOOGLE_DOMAINS",
    "DEFAULT_USER_AGENT",
    "CancelToken",
    "RateLimiter",
    "default_limiter",
    "Result",
    "SearchOptions",
    "GoogleSearchError",
    "SearchError",
    "Cancelled",
    "DeadlineExceeded",
    "TransportError",
    "Blocked",
]
