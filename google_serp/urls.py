"""Search URL construction."""

from urllib.parse import urlencode

from .domains import base_url
from .types import DEFAULT_COUNTRY_CODE, DEFAULT_LANGUAGE_CODE


def build_url(
    term: str,
    country_code: str = DEFAULT_COUNTRY_CODE,
    language_code: str = DEFAULT_LANGUAGE_CODE,
    limit: int = 0,
    start: int = 0,
) -> str:
    """Build the Google search URL for a query.

    Args:
        term: The search query. Surrounding whitespace is stripped.
        country_code: Selects the localized Google domain. Unknown codes use google.com.
        language_code: Value of the ``hl`` parameter.
        limit: Value of ``num``. Omitted when 0.
        start: Value of ``start``. Omitted when 0.

    Returns:
        The fully encoded request URL.
    """
    params = {
        "q": term.strip(),
        "hl": language_code,
    }
    if start != 0:
        params["start"] = str(start)
    if limit != 0:
        params["num"] = str(limit)

    return base_url(country_code) + urlencode(sorted(params.items()))
