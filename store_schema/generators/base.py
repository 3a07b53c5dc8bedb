"""
Shared builder functions for the Store schema generator.
"""
import logging
import math
import re

from store_schema.config import SCHEMA_CONTEXT, STORE_SAME_AS

logger = logging.getLogger(__name__)

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
WEEKEND = ["Sunday", "Saturday"]

_LEADING_NUMBER = re.compile(r"[+-]?(?:Infinity|\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def make_context() -> str:
    return SCHEMA_CONTEXT


def parse_coordinate(raw: str) -> float:
    """
    Read the leading number of `raw` ("45.48abc" -> 45.48).
    Anything without a numeric prefix becomes NaN instead of raising.
    """
    match = _LEADING_NUMBER.match((raw or "").lstrip())
    if not match:
        logger.warning("Coordinate %r is not numeric; emitting NaN", raw)
        return math.nan
    return float(match.group(0))


def split_hours(hours: str) -> tuple[str, str]:
    """'10:00-19:00' -> ('10:00', '19:00'). No separator leaves closes empty."""
    opens, _, closes = (hours or "").partition("-")
    return opens, closes


def make_postal_address(data: dict) -> dict:
    return {
        "@type": "PostalAddress",
        "streetAddress": data.get("streetAddress", ""),
        "addressLocality": data.get("addressLocality", ""),
        "addressRegion": data.get("addressRegion", ""),
        "postalCode": data.get("postalCode", ""),
        "addressCountry": data.get("addressCountry", ""),
    }


def make_geo(lat: str, lng: str) -> dict:
    """lat/lng are output as Number (float) per schema.org spec."""
    return {
        "@type": "GeoCoordinates",
        "latitude": parse_coordinate(lat),
        "longitude": parse_coordinate(lng),
    }


def make_opening_hours(days: list[str], hours: str) -> dict:
    opens, closes = split_hours(hours)
    return {
        "@type": "OpeningHoursSpecification",
        "dayOfWeek": list(days),
        "opens": opens,
        "closes": closes,
    }


def make_same_as(urls=STORE_SAME_AS) -> list[str]:
    return [u for u in urls if u]
