import pytest
import respx

from google_serp import RateLimiter


def result_block(url="https://example.com", title="Example", description="An example page."):
    """Markup of one Google result block. ``url=None`` leaves out the href."""
    href = "" if url is None else f' href="{url}"'
    return (
        '<div class="g"><div class="rc">'
        f'<div class="r"><a{href}><h3>{title}</h3></a></div>'
        f'<div class="s"><div><span><span>{description}</span></span></div></div>'
        "</div></div>"
    )


def results_page(*blocks):
    return "<html><body><div id=\"search\">" + "".join(blocks) + "</div></body></html>"


def numbered_page(count):
    return results_page(
        *(
            result_block(f"https://example.com/{i}", f"Title {i}", f"Snippet {i}")
            for i in range(1, count + 1)
        )
    )


@pytest.fixture
def limiter():
    """A limiter that never makes tests wait."""
    return RateLimiter(rate=float("inf"), burst=1)


GOOGLE_URL = r"^https://www\.google\.[a-z.]+/search\?.*$"


@pytest.fixture
def google():
    """respx route catching every Google search request."""
    with respx.mock(assert_all_called=False) as router:
        yield router.get(url__regex=GOOGLE_URL)
