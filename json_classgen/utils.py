"""Reading sample JSON from text, files and URLs.

Sample documents are often pasted from logs or source code, so text input is
normalized by :func:`clean_json_text` before it reaches ``json.loads``.
"""

import json
import re
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

_TRAILING_COMMA_RE = re.compile(r",(?=\s*[}\]])")


class JSONLoaderError(Exception):
    """A sample could not be read or decoded."""

    pass


class InvalidJSONError(JSONLoaderError):
    """Text is not valid JSON, even after cleanup."""

    pass


def clean_json_text(raw_text: str) -> str:
    """Normalize almost-JSON text before parsing.

    Every single quote becomes a double quote and commas directly before a
    closing ``}`` or ``]`` are dropped. Not JSON aware: apostrophes inside
    string values are replaced too.

    Args:
        raw_text: Text that should be JSON.

    Returns:
        Cleaned text.
    """
    return _TRAILING_COMMA_RE.sub("", raw_text.replace("'", '"'))


def parse_json_text(text: str, clean: bool = True) -> Any:
    """Decode JSON text, by default after :func:`clean_json_text`.

    Raises:
        InvalidJSONError: If the text still is not JSON.
    """
    source = clean_json_text(text) if clean else text
    try:
        return json.loads(source)
    except json.JSONDecodeError as e:
        logger.debug(f"Rejected JSON text ({len(text)} chars): {e}")
        raise InvalidJSONError(f"Invalid JSON: {e}") from e


def load_json_from_file(file_path: str | Path, clean: bool = False) -> tuple[str, Any]:
    """Read and decode a local JSON file.

    Args:
        file_path: File to read (UTF-8).
        clean: Run :func:`clean_json_text` on the contents first.

    Returns:
        ``(source label, value)``.

    Raises:
        FileNotFoundError: If the path does not exist.
        JSONLoaderError: If the file is unreadable or not JSON.
    """
    path = Path(file_path)
    if not path.exists():
        logger.error(f"No such file: {path}")
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() != ".json":
        logger.warning(f"Reading {path} as JSON despite its '{path.suffix}' suffix")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        raise JSONLoaderError(f"Cannot read {path}: {e}") from e

    try:
        value = parse_json_text(text, clean=clean)
    except InvalidJSONError as e:
        raise InvalidJSONError(f"{path}: {e}") from e

    logger.info(f"Loaded sample from {path}")
    return f"📄 {path}", value


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Fetch and decode JSON over HTTP(S).

    Returns:
        ``(source label, value)``.

    Raises:
        JSONLoaderError: On malformed URLs, transport or HTTP errors and
            non-JSON bodies.
    """
    parts = urlparse(url)
    if not (parts.scheme and parts.netloc):
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        content_type = response.headers.get("content-type", "").lower()
        if "json" not in content_type:
            logger.warning(f"{url} answered with content type '{content_type}'")
        value = response.json()
    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request timeout after {timeout}s: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except json.JSONDecodeError as e:
        raise InvalidJSONError(f"Invalid JSON from {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.debug(f"Request to {url} failed", exc_info=True)
        raise JSONLoaderError(f"Request failed for {url}: {e}") from e

    logger.info(f"Loaded sample from {url}")
    return f"🌐 {url}", value


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
    clean: bool = False,
) -> tuple[str, Any]:
    """Load a sample from exactly one of ``file_path`` or ``url``.

    ``clean`` applies to files only; URL bodies are decoded as served.
    """
    if (file_path is None) == (url is None):
        raise JSONLoaderError("Exactly one of file_path or url is required")

    if file_path is not None:
        return load_json_from_file(file_path, clean=clean)
    return load_json_from_url(url, timeout)
