"""
Store schema generator: one locale's JSON-LD view of a FieldSet.
"""
from store_schema.config import STORE_IMAGE_URL
from store_schema.generators.base import (
    WEEKDAYS, WEEKEND, make_context, make_geo, make_opening_hours,
    make_postal_address, make_same_as,
)
from store_schema.models import FieldSet, Locale, check_locale


def build(fields: FieldSet, locale: Locale) -> dict:
    """
    Generate the schema.org Store object for `locale` ("en" or "fr").

    The weekend entry covers Saturday and Sunday but is filled from
    openingHours_Sa only; openingHours_Su is not read.
    """
    data = fields.project(check_locale(locale))

    return {
        "@context": make_context(),
        "@type": "Store",
        "name": data["name"],
        "description": data["description"],
        "url": data["url"],
        "image": STORE_IMAGE_URL,
        "telephone": data["telephone"],
        "address": make_postal_address(data),
        "geo": make_geo(data["latitude"], data["longitude"]),
        "openingHoursSpecification": [
            make_opening_hours(WEEKDAYS, data["openingHours_Mo-Fr"]),
            make_opening_hours(WEEKEND, data["openingHours_Sa"]),
        ],
        "sameAs": make_same_as(),
    }
