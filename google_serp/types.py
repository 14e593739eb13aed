"""Type definitions for google-serp."""

from dataclasses import asdict, dataclass
from typing import Optional

DEFAULT_COUNTRY_CODE = "us"
DEFAULT_LANGUAGE_CODE = "en"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/61.0.3163.100 Safari/537.36"
)


@dataclass(frozen=True)
class Result:
    """A single Google search result."""

    rank: int
    """1-based position among accepted results, in page order."""

    url: str
    """Result URL."""

    title: str
    """Result title."""

    description: str
    """Result snippet."""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SearchOptions:
    """Options for configuring a search request."""

    country_code: str = DEFAULT_COUNTRY_CODE
    """ISO 3166-1 alpha-2 code of the localized Google homepage. Defaults to "us"."""

    language_code: str = DEFAULT_LANGUAGE_CODE
    """Value of the ``hl`` parameter. Defaults to "en"."""

    limit: int = 0
    """Maximum number of results to return. 0 means no limit."""

    start: int = 0
    """Rank offset of the first result (the ``start`` parameter)."""

    user_agent: str = DEFAULT_USER_AGENT
    """User-Agent header sent with the request."""

    over_limit: bool = False
    """Request 1.5x ``limit`` results, then trim back to ``limit``."""

    proxy: Optional[str] = None
    """HTTP proxy URL."""

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")

    @property
    def fetch_limit(self) -> int:
        """Number of results to ask Google for."""
        if self.over_limit and self.limit != 0:
            return int(self.limit * 1.5)
        return self.limit
