"""Utility functions for loading schema source text.

This module provides functions for reading schema text from files, URLs
and standard input with proper error handling.
"""

import sys
from pathlib import Path
from typing import TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

KNOWN_SUFFIXES = {".json", ".ts", ".js", ".mjs", ".cjs"}


class InputLoaderError(Exception):
    """Custom exception for input loading errors."""

    pass


def load_text_from_file(file_path: str | Path) -> tuple[str, str]:
    """Load schema text from a local file.

    Args:
        file_path: Path to the source file.

    Returns:
        Tuple of (source description, file contents).

    Raises:
        FileNotFoundError: If file doesn't exist.
        InputLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load schema text from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in KNOWN_SUFFIXES:
        # Content decides the format, not the extension
        logger.warning(f"Unexpected file extension: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise InputLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Loaded {len(text)} characters from {file_path}")
    return f"📄 {file_path}", text


def load_text_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Load schema text from a URL.

    Args:
        url: URL to fetch the source from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, response body).

    Raises:
        InputLoaderError: If URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to load schema text from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise InputLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise InputLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise InputLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise InputLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise InputLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info(f"Loaded {len(response.text)} characters from {url}")
    return f"🌐 {url}", response.text


def load_text_from_stream(stream: TextIO | None = None) -> tuple[str, str]:
    """Read schema text from a stream, standard input by default."""
    stream = stream or sys.stdin
    text = stream.read()
    if not text.strip():
        raise InputLoaderError("No input received on stdin")
    return "⌨️  stdin", text


def load_text(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, str]:
    """Load schema text from either a file or URL.

    Args:
        file_path: Path to local file (mutually exclusive with url).
        url: URL to fetch from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, text).

    Raises:
        InputLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise InputLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise InputLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_text_from_file(file_path)
    else:
        return load_text_from_url(url, timeout)
