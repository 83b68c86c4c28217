"""Shared HTTP helpers used by the action clients.

Encapsulates common request/timeout error handling so callers avoid
duplicating try/except blocks. Failures are raised as FetchError or
PayloadError; nothing here retries or caches.
"""
from __future__ import annotations

import logging
from typing import Any

import requests

from common.logging_utils import Timer, extra_context, is_debug_enabled, safe_url
from constants import Constants
from errors import FetchError, PayloadError

logger = logging.getLogger(__name__)


def prepared_url(url: str, params: Any = None) -> str:
    """Return ``url`` with ``params`` encoded the way requests sends them."""
    return requests.Request("GET", url, params=params).prepare().url


def safe_get(url: str, *, context: str, **kwargs: Any) -> requests.Response:
    """Perform a GET request with consistent error handling and DEBUG traces.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "azul").
        **kwargs: Passed through to requests.get.

    Returns:
        requests.Response: The HTTP response object.

    Raises:
        FetchError: On timeout or any transport failure.
    """
    full_url = prepared_url(url, kwargs.get("params"))
    safe_target = safe_url(full_url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.get(url, timeout=Constants.REQUEST_TIMEOUT, **kwargs)
        except requests.Timeout as exc:
            raise FetchError(
                f"unable to get {full_url}: {context} request timed out after "
                f"{Constants.REQUEST_TIMEOUT} seconds",
                full_url,
            ) from exc
        except requests.RequestException as exc:  # includes ConnectionError
            raise FetchError(f"unable to get {full_url}\n{exc}", full_url) from exc
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context
                )
            )
        return res


def get_json(url: str, *, context: str, **kwargs: Any) -> Any:
    """GET ``url`` and decode the JSON body.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs.
        **kwargs: Passed through to requests.get (e.g. ``params``).

    Returns:
        The decoded JSON document.

    Raises:
        FetchError: On transport failure or a non-200 status. The body is not
            decoded in that case.
        PayloadError: When the body is not valid JSON.
    """
    res = safe_get(url, context=context, **kwargs)
    if res.status_code != 200:
        full_url = prepared_url(url, kwargs.get("params"))
        raise FetchError(
            f"unable to download {full_url}: {res.status_code}", full_url, res.status_code
        )
    try:
        return res.json()
    except ValueError as exc:  # json.JSONDecodeError and requests' wrapper
        raise PayloadError(f"unable to decode payload\n{exc}") from exc
