"""
HTTP fetching for lyrics sources.

This module intentionally contains only network logic:
- requests
- retries
- backoff

No parsing. No Genius-specific semantics.
"""

import random
import time
from typing import Optional

import requests  # type: ignore[import-untyped]

from ..config import HTTP_TIMEOUT, MAX_RETRIES, MAX_RETRY_SLEEP, RETRY_SLEEP, USER_AGENT
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _get_with_retry(
    url: str,
    headers: dict,
    timeout: int,
    max_retries: int,
    retry_sleep: float,
    session: Optional[requests.Session],
) -> Optional[requests.Response]:
    sess = session or requests
    delay = retry_sleep
    attempts = max(max_retries, 1)
    for attempt in range(attempts):
        try:
            resp = sess.get(url, headers=headers, timeout=timeout)
            resp.raise_for_status()
            return resp
        except requests.exceptions.RequestException as e:
            logger.debug(f"Request {attempt + 1}/{attempts} for {url} failed: {e}")
            if attempt < attempts - 1:
                time.sleep(delay + random.random())
                delay = min(delay * 2, MAX_RETRY_SLEEP)
    return None


def fetch_html(
    url: str,
    *,
    headers: Optional[dict] = None,
    timeout: int = HTTP_TIMEOUT,
    max_retries: int = MAX_RETRIES,
    retry_sleep: float = RETRY_SLEEP,
    session: Optional[requests.Session] = None,
) -> Optional[str]:
    """
    Fetch a page and return raw HTML.

    Returns None on failure.
    """
    headers = headers or {"User-Agent": USER_AGENT}
    resp = _get_with_retry(url, headers, timeout, max_retries, retry_sleep, session)
    return resp.text if resp is not None else None


def fetch_json(
    url: str,
    *,
    headers: Optional[dict] = None,
    timeout: int = HTTP_TIMEOUT,
    max_retries: int = MAX_RETRIES,
    retry_sleep: float = RETRY_SLEEP,
    session: Optional[requests.Session] = None,
) -> Optional[dict]:
    """
    Fetch JSON from a URL and return as a dict.

    Returns None on failure.
    """
    headers = headers or {"User-Agent": USER_AGENT, "Accept": "application/json"}
    resp = _get_with_retry(url, headers, timeout, max_retries, retry_sleep, session)
    if resp is None:
        return None
    try:
        return resp.json()
    except ValueError as e:
        logger.debug(f"Invalid JSON from {url}: {e}")
        return None
