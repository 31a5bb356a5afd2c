"""Shared HTTP helpers used by the registry index client.

Encapsulates request/timeout error handling so callers receive either the
response body or one of the cratequery exceptions, never a raw
``requests`` exception.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from constants import Constants
from errors import IndexIoError, RequestError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def _default_headers() -> Dict[str, str]:
    return {"User-Agent": Constants.USER_AGENT}


def get_text(
    url: str,
    *,
    context: str,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> str:
    """Perform a GET request and return the body as text.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "index").
        headers: Extra request headers, merged over the defaults.
        **kwargs: Passed through to requests.get.

    Returns:
        str: The decoded response body.

    Raises:
        RequestError: On timeouts, connection failures and non-2xx statuses.
        IndexIoError: When the body cannot be read or decoded.
    """
    safe_target = safe_url(url)
    request_headers = _default_headers()
    if headers:
        request_headers.update(headers)

    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context,
                ),
            )
        try:
            res = requests.get(
                url,
                timeout=Constants.REQUEST_TIMEOUT,
                headers=request_headers,
                **kwargs,
            )
        except (requests.exceptions.ChunkedEncodingError,
                requests.exceptions.ContentDecodingError) as exc:
            logger.error("%s body read failed: %s", context, exc)
            raise IndexIoError(safe_target, str(exc)) from exc
        except requests.Timeout as exc:
            logger.error(
                "%s request timed out after %s seconds",
                context,
                Constants.REQUEST_TIMEOUT,
            )
            raise RequestError(safe_target, "timed out") from exc
        except requests.RequestException as exc:  # includes ConnectionError
            logger.error("%s connection error: %s", context, exc)
            raise RequestError(safe_target, str(exc)) from exc

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success" if res.ok else "http_error",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context,
                ),
            )

    if not 200 <= res.status_code < 300:
        raise RequestError(safe_target, f"status code {res.status_code}", res.status_code)

    try:
        return res.text
    except (UnicodeDecodeError, LookupError) as exc:
        raise IndexIoError(safe_target, str(exc)) from exc
