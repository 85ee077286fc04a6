"""Utility functions for loading Swagger documents.

This module provides functions for loading JSON or YAML schema documents
from files and URLs with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests
import yaml

from .logging_config import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class DocumentLoaderError(Exception):
    """Custom exception for document loading errors."""

    pass


def parse_document(text: str, prefer_yaml: bool = False) -> Any:
    """Parse document text as JSON, or as YAML.

    Args:
        text: Raw document text.
        prefer_yaml: Skip the JSON attempt (for ``.yaml`` sources).

    Returns:
        Parsed document.

    Raises:
        DocumentLoaderError: If the text is neither valid JSON nor YAML.
    """
    if not prefer_yaml:
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            logger.debug("Input is not JSON, trying YAML")

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentLoaderError(f"Invalid JSON/YAML document: {e}") from e


def load_document_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load a schema document from a local file.

    Args:
        file_path: Path to the JSON or YAML file.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        FileNotFoundError: If file doesn't exist.
        DocumentLoaderError: If file cannot be read or parsed.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load document from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix != ".json" and suffix not in YAML_SUFFIXES:
        logger.warning(f"File does not have a .json/.yaml extension: {file_path}")
        # Don't raise, just warn - content decides

    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise DocumentLoaderError(f"Error reading file {file_path}: {e}") from e

    if suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in file {file_path}: {e}")
            raise DocumentLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    else:
        data = parse_document(text, prefer_yaml=suffix in YAML_SUFFIXES)

    logger.info(f"Successfully loaded document from {file_path}")
    return f"📄 {file_path}", data


def load_document_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load a schema document from a URL.

    Args:
        url: URL to fetch the document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        DocumentLoaderError: If URL is invalid, request fails, or the
            response is not a valid document.
    """
    logger.debug(f"Attempting to load document from URL: {url}")

    # Validate URL
    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise DocumentLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise DocumentLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise DocumentLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise DocumentLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise DocumentLoaderError(f"Request error for URL {url}: {e}") from e

    # Check content type
    content_type = response.headers.get("content-type", "").lower()
    is_yaml = "yaml" in content_type or parsed_url.path.lower().endswith(YAML_SUFFIXES)
    if "json" not in content_type and not is_yaml:
        logger.warning(f"URL {url} has unexpected content type: {content_type}")

    data = parse_document(response.text, prefer_yaml=is_yaml)
    logger.info(f"Successfully loaded document from {url}")
    return f"🌐 {url}", data


def load_document(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load a schema document from either a file or URL.

    Args:
        file_path: Path to local file (mutually exclusive with url).
        url: URL to fetch from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        DocumentLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise DocumentLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise DocumentLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_document_from_file(file_path)
    else:
        return load_document_from_url(url, timeout)
