"""Loading of model descriptions.

A description is read from a local file or fetched over HTTP, decoded as
JSON and converted into a ``Model`` in one step, so every failure is
reported together with the source it came from.
"""

import json
from pathlib import Path
from urllib.parse import urlparse

import requests

from .codegen.core.model import Model, ModelError, model_from_dict
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30


class ModelLoadError(Exception):
    """Raised when a model description cannot be read or decoded."""

    pass


def _read_file(file_path: Path) -> str:
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModelLoadError(f"Error reading file {file_path}: {e}") from e


def _fetch_url(url: str, timeout: int) -> str:
    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        raise ModelLoadError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise ModelLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise ModelLoadError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise ModelLoadError(f"HTTP error {e.response.status_code} for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        raise ModelLoadError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type and not url.endswith(".json"):
        logger.warning("URL %s does not have JSON content type: %s", url, content_type)
    return response.text


def parse_model(text: str, source: str = "<string>") -> Model:
    """Decode a JSON model description and build the model from it.

    Args:
        text: JSON document.
        source: Where the document came from, used in error messages.

    Raises:
        ModelLoadError: If the text is not valid JSON.
        ModelError: If the description is malformed.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ModelLoadError(f"Invalid JSON in {source}: {e}") from e

    try:
        model = model_from_dict(data)
    except ModelError as e:
        raise ModelError(f"Invalid model in {source}: {e}") from e

    logger.debug(
        "Model from %s: %d classes, %d enums", source, len(model.classes), len(model.enums)
    )
    return model


def load_model(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> tuple[str, Model]:
    """Load a model description from either a file or a URL.

    Args:
        file_path: Path to a local JSON file (mutually exclusive with url).
        url: URL to fetch the description from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, model).

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ModelLoadError: If no single source is given, or it cannot be read or decoded.
        ModelError: If the description is malformed.
    """
    if not file_path and not url:
        raise ModelLoadError("Either file_path or url must be provided")
    if file_path and url:
        raise ModelLoadError("Cannot specify both file_path and url")

    if file_path:
        path = Path(file_path)
        source, text = str(path), _read_file(path)
    else:
        source, text = url, _fetch_url(url, timeout)

    logger.info("Loading model from %s", source)
    return source, parse_model(text, source)
