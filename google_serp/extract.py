"""Turn result blocks of a Google results page into :class:`Result` objects.

The selectors follow Google's desktop markup: each hit is a ``div.g`` block
holding a ``div.rc`` content block with the link, an ``h3`` title and the
snippet nested a few ``div``/``span`` levels down. Google changes this markup
from time to time; blocks that do not fit are skipped rather than reported.
"""

from typing import List, Optional

from bs4 import Tag
from loguru import logger

from .collector import Collector
from .context import CancelToken
from .errors import GoogleSearchError
from .types import Result

RESULT_SELECTOR = "div.g"
CONTENT_SELECTOR = "div.rc"
DESCRIPTION_SELECTOR = "div > div > span > span"

PLACEHOLDER_LINK = "#"


class CallState:
    """Results and the first error of one search call."""

    def __init__(self) -> None:
        self.results: List[Result] = []
        self.error: Optional[GoogleSearchError] = None

    @property
    def next_rank(self) -> int:
        return len(self.results) + 1

    def record_error(self, err: GoogleSearchError) -> None:
        """Keep ``err`` unless an earlier error was already recorded."""
        if self.error is None:
            self.error = err


class ResultExtractor:
    """Callback run once per candidate result block."""

    def __init__(self, token: CancelToken, state: CallState) -> None:
        self.token = token
        self.state = state

    def __call__(self, element: Tag) -> None:
        if self.state.error is not None:
            return

        err = self.token.error()
        if err is not None:
            self.state.record_error(err)
            return

        result = parse_candidate(element, self.state.next_rank)
        if result is not None:
            self.state.results.append(result)


def parse_candidate(element: Tag, rank: int) -> Optional[Result]:
    """Build a Result from one ``div.g`` block, or None if it is malformed."""
    content = element.select_one(CONTENT_SELECTOR)
    if content is None:
        logger.trace("Skipping result block without content")
        return None

    anchor = content.find("a")
    href = anchor.get("href") if anchor is not None else None
    link = (href or "").strip()
    if not link or link == PLACEHOLDER_LINK:
        logger.trace("Skipping result block with link {!r}", link)
        return None

    heading = content.find("h3")
    title = heading.get_text().strip() if heading is not None else ""

    description = "".join(
        span.get_text() for span in content.select(DESCRIPTION_SELECTOR)
    ).strip()

    return Result(rank=rank, url=link, title=title, description=description)


def extract_results(html: str, token: Optional[CancelToken] = None) -> List[Result]:
    """Parse a complete results page.

    Raises:
        Cancelled: If ``token`` fires before every block was processed.
    """
    state = CallState()
    collector = Collector()
    collector.on_html(RESULT_SELECTOR, ResultExtractor(token or CancelToken.background(), state))
    collector.handle_html(html)
    if state.error is not None:
        raise state.error
    return state.results
