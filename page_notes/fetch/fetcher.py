"""
HTTP page fetching.

Pages are fetched one at a time with a synchronous httpx client that
follows redirects and identifies itself with a fixed User-Agent. Failures
are returned as values so the caller can record them and move on.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either text will be populated (success) or error will be populated (failure),
    but never both. status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        text: The response body decoded as UTF-8, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    text: str | None
    error: str | None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_url(
    url: str,
    timeout: float,
    connect_timeout: float,
    user_agent: str,
    trust_env: bool = True,
) -> FetchResult:
    """Fetch a URL and return its body as UTF-8 text.

    Uses a synchronous HTTP client that follows redirects and respects
    system proxy settings when trust_env is enabled. There is no retry:
    a single failed attempt is reported as the result.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        connect_timeout: Connection establishment timeout in seconds
        user_agent: User-Agent header string
        trust_env: Whether to respect system proxy settings from environment

    Returns:
        FetchResult with text on a 2xx response, or an error message for
        non-2xx statuses, timeouts, network failures, malformed URLs and
        header values that cannot be sent as ASCII
    """
    headers = {"User-Agent": user_agent}
    try:
        with httpx.Client(
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            headers=headers,
            follow_redirects=True,
            trust_env=trust_env,
        ) as client:
            resp = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        return FetchResult(url=url, status_code=None, text=None, error=f"{type(exc).__name__}: {exc}")

    if not 200 <= resp.status_code < 300:
        return FetchResult(
            url=url,
            status_code=resp.status_code,
            text=None,
            error=f"HTTP {resp.status_code} fetching {url}",
        )

    html = resp.content.decode("utf-8", errors="replace")
    return FetchResult(url=url, status_code=resp.status_code, text=html, error=None)
