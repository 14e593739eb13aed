"""Fetch and parse Google search results."""

import dataclasses
from typing import List, Optional

import httpx
from loguru import logger

from .collector import Collector, Request
from .context import CancelToken
from .errors import Blocked, GoogleSearchError, SearchError, TransportError
from .extract import RESULT_SELECTOR, CallState, ResultExtractor
from .ratelimit import RateLimiter, default_limiter
from .types import DEFAULT_LANGUAGE_CODE, DEFAULT_USER_AGENT, Result, SearchOptions
from .urls import build_url

# Known weak point: detection matches the error message text, not the status code.
BLOCKED_MARKER = "Too Many Requests"


async def search(
    term: str,
    options: Optional[SearchOptions] = None,
    *,
    token: Optional[CancelToken] = None,
    limiter: Optional[RateLimiter] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[Result]:
    """Return the results Google lists for ``term``.

    Args:
        term: The search query.
        options: Request options. Defaults to ``SearchOptions()``.
        token: Cancellation token checked before the rate-limit wait, before
            the fetch and before each result block is parsed.
        limiter: Rate limiter to wait on. Defaults to the process-wide one.
        client: httpx client to reuse. A temporary one is opened otherwise.

    Returns:
        Results in page order, ranked from 1, at most ``options.limit`` long
        when a limit is set.

    Raises:
        Cancelled: If ``token`` fires.
        Blocked: If Google answered "Too Many Requests".
        TransportError: If the page could not be fetched.
    """
    if token is None:
        token = CancelToken.background()
    if options is None:
        options = SearchOptions()
    if limiter is None:
        limiter = default_limiter()

    await limiter.wait(token)

    collector = Collector(
        user_agent=options.user_agent or DEFAULT_USER_AGENT,
        proxy=options.proxy,
        client=client,
    )
    language_code = options.language_code or DEFAULT_LANGUAGE_CODE
    state = CallState()

    def check_cancelled(request: Request) -> None:
        err = token.error()
        if err is not None:
            request.abort()
            state.record_error(err)

    def record_transport_error(err: TransportError) -> None:
        state.record_error(err)

    collector.on_request(check_cancelled)
    collector.on_error(record_transport_error)
    collector.on_html(RESULT_SELECTOR, ResultExtractor(token, state))

    url = build_url(
        term,
        options.country_code,
        language_code,
        options.fetch_limit,
        options.start,
    )
    logger.debug("Searching {} (fetch limit {})", url, options.fetch_limit)

    await collector.visit(url)

    if state.error is not None:
        raise _classify(state.error)

    results = state.results
    logger.debug("Extracted {} results for {!r}", len(results), term)
    if options.limit != 0 and len(results) > options.limit:
        results = results[: options.limit]
    return results


def _classify(err: GoogleSearchError) -> GoogleSearchError:
    if BLOCKED_MARKER in str(err):
        logger.warning("Google blocked the request: {}", err)
        blocked = Blocked()
        blocked.__cause__ = err
        return blocked
    return err


class GoogleSearch:
    """Google search client.

    Holds default options, an optional shared httpx client and the rate
    limiter used for every call.

    Example::

        from google_serp import GoogleSearch

        async with GoogleSearch(SearchOptions(country_code="de")) as client:
            results = await client.search("rust programming", limit=10)
            for r in results:
                print(f"{r.rank}. {r.title}: {r.url}")
    """

    def __init__(
        self,
        options: Optional[SearchOptions] = None,
        *,
        limiter: Optional[RateLimiter] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.options = options or SearchOptions()
        self._limiter = limiter
        self._client = client
        self._owns_client = False

    async def __aenter__(self) -> "GoogleSearch":
        if self._client is None:
            self._client = httpx.AsyncClient(proxy=self.options.proxy, follow_redirects=True)
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the httpx client if it was opened by ``__aenter__``."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def search(
        self,
        query: str,
        *,
        token: Optional[CancelToken] = None,
        **overrides,
    ) -> List[Result]:
        """Perform a search query.

        Args:
            query: The search query string.
            token: Cancellation token for this call.
            **overrides: ``SearchOptions`` fields replacing the client defaults
                for this call only, e.g. ``limit=5``.

        Returns:
            The ranked results.

        Raises:
            SearchError: If the query is empty.
            Cancelled: If ``token`` fires.
            Blocked: If Google answered "Too Many Requests".
            TransportError: If the page could not be fetched.
        """
        if not query or not query.strip():
            raise SearchError("Query cannot be empty")

        try:
            options = dataclasses.replace(self.options, **overrides)
        except (TypeError, ValueError) as e:
            raise SearchError(f"Invalid search options: {e}") from e

        return await search(
            query,
            options,
            token=token,
            limiter=self._limiter,
            client=self._client,
        )
