"""Offset-based pager for the private chat history endpoint.

GET {base_url}/v2/user/{user}/history is requested page by page, with the
same `date` on every page so the snapshot stays consistent while new
messages arrive. An empty (or missing) `items` ends the pagination.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Callable
from http import HTTPStatus
from urllib.parse import quote

import requests

from .config import DEFAULT_BASE_URL, DEFAULT_HTTP_TIMEOUT
from .errors import MalformedResponseError, RemoteClientError, RemoteUnavailableError
from .schemas import DEFAULT_PAGE_SIZE, HistoryRecord, Page

__all__ = ["history_url", "history_params", "fetch_page", "fetch_history"]

_log = logging.getLogger(__name__)

_MAX_ERROR_TEXT = 200


def history_url(base_url: str, user: str) -> str:
    return f"{base_url.rstrip('/')}/v2/user/{quote(user, safe='@')}/history"


def history_params(offset: int, page_size: int, as_of: str) -> dict[str, str | int]:
    return {
        "include_deleted": "true",
        "reverse": "true",
        "max-results": page_size,
        "start-index": offset,
        "date": as_of,
    }


def _error_message(resp) -> str:
    """Prefer the API's own `error.message`, fall back to the raw body."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        msg = body["error"].get("message")
        if msg:
            return str(msg)
    text = (getattr(resp, "text", "") or "").strip()
    return text[:_MAX_ERROR_TEXT] or (getattr(resp, "reason", "") or "")


def _page_fingerprint(page: Page) -> str:
    s = json.dumps(page, sort_keys=True, ensure_ascii=False)
    return hashlib.sha1(s.encode("utf-8")).hexdigest()


def _extract_items(body: object) -> Page:
    if not isinstance(body, dict):
        raise MalformedResponseError(f"expected a JSON object, got {type(body).__name__}")
    items = body.get("items")
    if items is None:
        return []
    if not isinstance(items, list):
        raise MalformedResponseError(f"'items' must be a list, got {type(items).__name__}")
    return items


def fetch_page(  # noqa: PLR0913
    token: str,
    user: str,
    *,
    offset: int,
    as_of: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float | None = DEFAULT_HTTP_TIMEOUT,
    _get: Callable[..., object] | None = None,
) -> Page:
    """Return the records of one page (possibly empty).

    Raises:
      RemoteClientError:      4xx from the API.
      RemoteUnavailableError: 5xx or the request itself failed.
      MalformedResponseError: body is not JSON / not the expected document.
    """
    get = _get or requests.get
    url = history_url(base_url, user)
    try:
        resp = get(
            url,
            headers={"Authorization": f"Bearer {token}"},
            params=history_params(offset, page_size, as_of),
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise RemoteUnavailableError(f"GET {url} failed: {e}") from e

    status = getattr(resp, "status_code", HTTPStatus.OK)
    if HTTPStatus.BAD_REQUEST <= status < HTTPStatus.INTERNAL_SERVER_ERROR:
        raise RemoteClientError(f"Client error: GET {url} resulted in HTTP {status}: {_error_message(resp)}", status)
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        raise RemoteUnavailableError(f"Server error: GET {url} resulted in HTTP {status}: {_error_message(resp)}")

    try:
        body = resp.json()
    except ValueError as e:
        raise MalformedResponseError(f"GET {url} returned a non-JSON body: {e}") from e
    return _extract_items(body)


def fetch_history(  # noqa: PLR0913
    token: str,
    user: str,
    *,
    as_of: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float | None = DEFAULT_HTTP_TIMEOUT,
    logger: logging.Logger | None = None,
    _get: Callable[..., object] | None = None,
) -> list[HistoryRecord]:
    """Fetch every page for `user` and return all records in arrival order.

    Everything is kept in memory until the last page; nothing is written here.
    """
    log = logger or _log
    records: list[HistoryRecord] = []
    seen: set[str] = set()
    offset = 0

    while True:
        log.info("Fetching %d to %d records...", offset, offset + page_size)
        page = fetch_page(
            token,
            user,
            offset=offset,
            as_of=as_of,
            page_size=page_size,
            base_url=base_url,
            timeout=timeout,
            _get=_get,
        )
        if not page:
            break

        # сервер не сдвинул курсор (или ходит по кругу), иначе крутились бы вечно
        fp = _page_fingerprint(page)
        if fp in seen:
            raise MalformedResponseError(f"server returned an already seen page again at offset {offset}")
        seen.add(fp)

        records.extend(page)
        offset += page_size

    log.debug("user=%s requests=%d records=%d", user, offset // page_size + 1, len(records))
    return records
