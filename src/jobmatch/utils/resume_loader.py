"""Utilities for loading resume text before it is scored.

Failures never propagate: they are logged and an empty string is returned,
which the scorers turn into a score of 0.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import ResumeFetchSettings

logger = logging.getLogger(__name__)

RETRY_STATUSES = (429, 500, 502, 503, 504)


def create_session(settings: ResumeFetchSettings) -> requests.Session:
    """Return a session that retries transient failures."""
    retry = Retry(
        total=settings.max_retries,
        backoff_factor=settings.backoff_factor,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=frozenset({"GET"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def fetch_resume_text(
    url: Optional[str],
    session: Optional[requests.Session] = None,
    settings: Optional[ResumeFetchSettings] = None,
) -> str:
    """Download a resume and return its body as text."""
    if not url:
        return ""
    settings = settings or ResumeFetchSettings()
    if session is None:
        with create_session(settings) as owned_session:
            return _get_text(owned_session, url, settings.timeout)
    return _get_text(session, url, settings.timeout)


def _get_text(session: requests.Session, url: str, timeout: float) -> str:
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Error extracting text from resume %s: %s", url, exc)
        return ""
    return response.text


def read_resume_text(path: Path) -> str:
    """Read a plain text resume from disk."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Error reading resume %s: %s", path, exc)
        return ""


def load_resume_text(
    source: Union[str, Path, None],
    session: Optional[requests.Session] = None,
    settings: Optional[ResumeFetchSettings] = None,
) -> str:
    """Load resume text from a URL or a local file."""
    if not source:
        return ""
    if isinstance(source, str) and source.lower().startswith(("http://", "https://")):
        return fetch_resume_text(source, session=session, settings=settings)
    return read_resume_text(Path(source).expanduser())
