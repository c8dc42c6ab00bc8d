"""
Download the workbook from a direct-download URL (e.g. a OneDrive share
link ending in ``download=1``).

Retries transient errors (connection, timeout, 429, 5xx) with exponential
backoff via tenacity.  An HTML response means the link points at a
viewer or login page rather than the file, and is rejected immediately.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import requests
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


def _default_timeout() -> float:
    return float(os.getenv("DOWNLOAD_TIMEOUT", "60"))


# Retry configuration
_MAX_RETRIES = 4
_MIN_WAIT_SECONDS = 2
_MAX_WAIT_SECONDS = 30


class WorkbookDownloadError(RuntimeError):
    """The URL did not deliver an .xlsx file."""


class _TransientHTTPError(WorkbookDownloadError):
    """Server-side or rate-limit status worth retrying."""


_RETRYABLE_EXCEPTIONS = (
    requests.ConnectionError,
    requests.Timeout,
    _TransientHTTPError,
)


@retry(
    retry=retry_if_exception_type(_RETRYABLE_EXCEPTIONS),
    stop=stop_after_attempt(_MAX_RETRIES),
    wait=wait_exponential(multiplier=1, min=_MIN_WAIT_SECONDS, max=_MAX_WAIT_SECONDS),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
def fetch_workbook_bytes(url: str, timeout: Optional[float] = None) -> bytes:
    """Return the raw bytes behind *url*, following redirects."""
    if timeout is None:
        timeout = _default_timeout()
    logger.info("Downloading workbook from %s", url)
    response = requests.get(url, timeout=timeout, allow_redirects=True)

    if response.status_code == 429 or response.status_code >= 500:
        raise _TransientHTTPError(
            f"Workbook download failed: {response.status_code} {response.reason}"
        )
    if not response.ok:
        raise WorkbookDownloadError(
            f"Workbook download failed: {response.status_code} {response.reason}"
        )

    content_type = response.headers.get("content-type", "")
    if "text/html" in content_type:
        raise WorkbookDownloadError(
            "The URL returned HTML (probably a preview or login page). "
            "Use a direct download link to the .xlsx file."
        )

    logger.info("  -> %d byte(s) downloaded", len(response.content))
    return response.content
