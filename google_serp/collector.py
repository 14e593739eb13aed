"""Fetch a page and hand its matching elements to registered callbacks."""

from typing import Callable, Dict, List, Optional, Tuple

import httpx
from bs4 import BeautifulSoup, Tag
from loguru import logger

from .errors import TransportError
from .types import DEFAULT_USER_AGENT


class Request:
    """An outgoing request, as seen by ``on_request`` hooks."""

    def __init__(self, url: str, headers: Dict[str, str]):
        self.url = url
        self.headers = headers
        self.aborted = False

    def abort(self) -> None:
        """Prevent the request from being sent."""
        self.aborted = True


class Collector:
    """Single-page scraper built on httpx and BeautifulSoup.

    Register callbacks, then ``await visit(url)``:

    - ``on_request(fn)``: ``fn(request)`` runs before sending and may call
      ``request.abort()``.
    - ``on_html(selector, fn)``: ``fn(element)`` runs once per element
      matching the CSS selector, in document order.
    - ``on_error(fn)``: ``fn(error)`` runs with a :class:`TransportError`
      when the fetch fails.

    ``visit`` reports failures through the error callbacks and does not raise
    them. A caller-supplied ``client`` is reused and left open; ``proxy`` only
    applies to the client the collector opens itself.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        proxy: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.user_agent = user_agent
        self.proxy = proxy
        self._client = client
        self._request_hooks: List[Callable[[Request], None]] = []
        self._html_callbacks: List[Tuple[str, Callable[[Tag], None]]] = []
        self._error_callbacks: List[Callable[[TransportError], None]] = []

    def on_request(self, fn: Callable[[Request], None]) -> None:
        self._request_hooks.append(fn)

    def on_html(self, selector: str, fn: Callable[[Tag], None]) -> None:
        self._html_callbacks.append((selector, fn))

    def on_error(self, fn: Callable[[TransportError], None]) -> None:
        self._error_callbacks.append(fn)

    async def visit(self, url: str) -> None:
        request = Request(
            url,
            {
                "User-Agent": self.user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            },
        )
        for hook in self._request_hooks:
            hook(request)
        if request.aborted:
            logger.debug("Request to {} aborted before sending", url)
            return

        try:
            body = await self._fetch(request)
        except TransportError as e:
            for fn in self._error_callbacks:
                fn(e)
            return

        self.handle_html(body)

    def handle_html(self, body: str) -> None:
        """Run the HTML callbacks over an already fetched document."""
        if not self._html_callbacks:
            return
        soup = BeautifulSoup(body, "html.parser")
        for selector, fn in self._html_callbacks:
            for element in soup.select(selector):
                fn(element)

    async def _fetch(self, request: Request) -> str:
        if self._client is not None:
            return await self._get(self._client, request)
        async with httpx.AsyncClient(proxy=self.proxy, follow_redirects=True) as client:
            return await self._get(client, request)

    async def _get(self, client: httpx.AsyncClient, request: Request) -> str:
        try:
            resp = await client.get(request.url, headers=request.headers)
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__, url=request.url) from e

        if not resp.is_success:
            raise TransportError(
                httpx.codes.get_reason_phrase(resp.status_code) or f"HTTP {resp.status_code}",
                status=resp.status_code,
                url=request.url,
            )
        return resp.text
