"""
Shared HTTP client for the geocoding and forecast data sources.

Provides a pre-configured ``requests.Session`` with a project User-Agent
(Nominatim rejects anonymous clients) and a default timeout. Requests are
made once; a failed load is reported to the user rather than retried.

Usage::

    from harvest_planner.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests

from harvest_planner.config import get_settings

DEFAULT_TIMEOUT = 30  # seconds


def create_session(
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with default headers and timeout.

    Args:
        timeout: Default timeout applied to every request.
        user_agent: User-Agent header (defaults to ``settings.user_agent``).
    """
    s = requests.Session()
    s.headers["User-Agent"] = user_agent or get_settings().user_agent

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session()
