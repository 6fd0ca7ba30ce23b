"""
Translation Loader

Fetches the translations document from a local JSON file or an HTTP(S)
URL. Failures are logged and reported as None so callers can fall back to
an empty search index.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from sitesearch.core.config import settings
from sitesearch.core.errors import TranslationsUnavailableError

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _is_retryable(exc: BaseException) -> bool:
    """Retry network failures and server errors, not client errors."""
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return False


_http_retry = retry(
    retry=retry_if_exception(_is_retryable),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    reraise=True,
)


@_http_retry
def _get_document(client: httpx.Client, url: str) -> Any:
    """GET the document with retry logic."""
    response = client.get(url)
    response.raise_for_status()
    return response.json()


@_http_retry
async def _aget_document(client: httpx.AsyncClient, url: str) -> Any:
    """GET the document with retry logic (async)."""
    response = await client.get(url)
    response.raise_for_status()
    return response.json()


def _read_file(source: str) -> Any:
    path = Path(source)
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise TranslationsUnavailableError(source, str(e)) from e
    except UnicodeDecodeError as e:
        raise TranslationsUnavailableError(source, f"invalid encoding: {e}") from e
    except json.JSONDecodeError as e:
        raise TranslationsUnavailableError(source, f"invalid JSON: {e}") from e


def _check_document(source: str, data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TranslationsUnavailableError(
            source, f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def _wrap_http_error(source: str, exc: Exception) -> TranslationsUnavailableError:
    if isinstance(exc, httpx.HTTPStatusError):
        return TranslationsUnavailableError(
            source, f"HTTP {exc.response.status_code}"
        )
    if isinstance(exc, ValueError):
        return TranslationsUnavailableError(source, f"invalid JSON: {exc}")
    return TranslationsUnavailableError(source, str(exc) or type(exc).__name__)


def load_translations(
    source: str | None = None,
    client: httpx.Client | None = None,
) -> dict[str, Any] | None:
    """
    Load the translations document.

    Args:
        source: File path or http(s) URL (defaults to TRANSLATIONS_SOURCE)
        client: Optional httpx client (for URL sources)

    Returns:
        Mapping of language code to translation tree, or None if unavailable.
    """
    source = source or settings.TRANSLATIONS_SOURCE
    try:
        if _is_url(source):
            own_client = client is None
            if client is None:
                client = httpx.Client(timeout=settings.LOAD_TIMEOUT_SEC)
            try:
                data = _get_document(client, source)
            except (httpx.HTTPError, ValueError) as e:
                raise _wrap_http_error(source, e) from e
            finally:
                if own_client:
                    client.close()
        else:
            data = _read_file(source)
        return _check_document(source, data)
    except TranslationsUnavailableError as e:
        logger.error(str(e))
        return None


async def aload_translations(
    source: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any] | None:
    """Async variant of load_translations."""
    source = source or settings.TRANSLATIONS_SOURCE
    try:
        if _is_url(source):
            own_client = client is None
            if client is None:
                client = httpx.AsyncClient(timeout=settings.LOAD_TIMEOUT_SEC)
            try:
                data = await _aget_document(client, source)
            except (httpx.HTTPError, ValueError) as e:
                raise _wrap_http_error(source, e) from e
            finally:
                if own_client:
                    await client.aclose()
        else:
            data = _read_file(source)
        return _check_document(source, data)
    except TranslationsUnavailableError as e:
        logger.error(str(e))
        return None
