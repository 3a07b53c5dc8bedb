"""
Constants for the Store schema output and loading of the default field fixture.
"""
import json
import logging
from pathlib import Path

from store_schema.models import FieldSet

logger = logging.getLogger(__name__)

DEFAULT_FIELDS_PATH = Path(__file__).parent / "data" / "default_store.json"

SCHEMA_CONTEXT = "http://schema.org"

STORE_IMAGE_URL = "https://cool-simple.com/cdn/shop/files/C_S_logo.png?v=1723622101&width=380"

STORE_SAME_AS = (
    "https://www.facebook.com/cooletsimple/",
    "https://www.instagram.com/cooletsimple/",
    "https://www.tiktok.com/@cooletsimple",
)

# Liquid expression compared against 'en' in the rendered template.
LOCALE_CONDITION = "request.locale.iso_code"


def load_default_fields(path: str | Path | None = None) -> FieldSet:
    """
    Read a default FieldSet from a JSON fixture.
    Falls back to the packaged fixture when no path is given.
    Raises ValueError when the file is not valid JSON or lacks a field.
    """
    path = Path(path) if path else DEFAULT_FIELDS_PATH
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Default fields fixture {path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Default fields fixture {path} must contain a JSON object.")

    logger.debug("Loaded default fields from %s", path)
    return FieldSet.from_dict(raw)
