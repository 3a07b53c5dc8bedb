"""Tests for the Store schema generator."""

import math

import pytest
from store_schema.config import STORE_IMAGE_URL, STORE_SAME_AS
from store_schema.generators.base import parse_coordinate, split_hours
from store_schema.generators.store import build
from store_schema.models import FIELD_KEYS, FieldSet, LocalizedValue

STORE_KEYS = [
    "@context", "@type", "name", "description", "url", "image", "telephone",
    "address", "geo", "openingHoursSpecification", "sameAs",
]


@pytest.fixture
def blank_fields() -> FieldSet:
    return FieldSet({key: LocalizedValue("", "") for key in FIELD_KEYS})


class TestBuild:
    """Tests for build()."""

    @pytest.mark.parametrize("locale", ["en", "fr"])
    def test_key_order(self, default_fields, locale: str):
        """Keys follow the schema construction order."""
        schema = build(default_fields, locale)
        assert list(schema) == STORE_KEYS
        assert schema["@context"] == "http://schema.org"
        assert schema["@type"] == "Store"

    def test_projects_locale(self, default_fields):
        """Each locale reads its own side of every pair."""
        en = build(default_fields, "en")
        fr = build(default_fields, "fr")
        assert en["name"] == "Cool&Simple Atwater Market"
        assert fr["name"] == "Magasin Cool&simple Atwater"
        assert en["telephone"] == "+1-514-419-3739"
        assert fr["telephone"] == "+1-514-419-3740"
        assert fr["address"]["streetAddress"] == "131 avenue Atwater (coin St-Ambroise)"

    def test_nested_objects(self, default_fields):
        """Address, geo and opening hours are typed sub-objects."""
        schema = build(default_fields, "en")
        assert schema["address"] == {
            "@type": "PostalAddress",
            "streetAddress": "131 avenue Atwater (corner St-Ambroise)",
            "addressLocality": "Montreal",
            "addressRegion": "QC",
            "postalCode": "H3J 2Z8",
            "addressCountry": "CA",
        }
        assert schema["geo"] == {"@type": "GeoCoordinates", "latitude": 45.484781, "longitude": -73.582882}
        weekdays, weekend = schema["openingHoursSpecification"]
        assert weekdays["dayOfWeek"] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
        assert (weekdays["opens"], weekdays["closes"]) == ("10:00", "19:00")
        assert weekend["dayOfWeek"] == ["Sunday", "Saturday"]

    def test_fixed_image_and_same_as(self, default_fields, blank_fields):
        """image and sameAs never come from the fields."""
        for fields in (default_fields, blank_fields):
            for locale in ("en", "fr"):
                schema = build(fields, locale)
                assert schema["image"] == STORE_IMAGE_URL
                assert schema["sameAs"] == list(STORE_SAME_AS)

    @pytest.mark.parametrize("locale", ["en", "fr"])
    def test_total_on_blank_fields(self, blank_fields, locale: str):
        """Empty strings everywhere still produce every key."""
        schema = build(blank_fields, locale)
        assert list(schema) == STORE_KEYS
        assert schema["name"] == ""
        assert math.isnan(schema["geo"]["latitude"])
        assert math.isnan(schema["geo"]["longitude"])
        for spec in schema["openingHoursSpecification"]:
            assert spec["opens"] == ""
            assert spec["closes"] == ""

    def test_deterministic(self, default_fields):
        """Same input, same output."""
        assert build(default_fields, "fr") == build(default_fields, "fr")

    def test_unknown_locale(self, default_fields):
        """Only en and fr are supported."""
        with pytest.raises(ValueError):
            build(default_fields, "de")


class TestWeekendHours:
    """The Saturday/Sunday entry reads openingHours_Sa only."""

    @pytest.mark.parametrize("sunday", ["09:30-18:00", "12:00-17:00", "", "closed"])
    def test_sunday_field_is_ignored(self, default_fields, sunday: str):
        """Known asymmetry: openingHours_Su never reaches the output."""
        fields = default_fields.replace({"openingHours_Su": LocalizedValue(sunday, sunday)})
        for locale in ("en", "fr"):
            weekend = build(fields, locale)["openingHoursSpecification"][1]
            assert weekend["dayOfWeek"] == ["Sunday", "Saturday"]
            assert weekend["opens"] == "09:30"
            assert weekend["closes"] == "18:00"


class TestHelpers:
    """Tests for coordinate and hours parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("45.484781", 45.484781),
        ("-73.582882", -73.582882),
        ("  12", 12.0),
        ("45.48abc", 45.48),
        ("1e3", 1000.0),
        (".5", 0.5),
        ("+7.", 7.0),
    ])
    def test_parse_coordinate(self, raw: str, expected: float):
        """The leading number is used."""
        assert parse_coordinate(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "N45", "-", None])
    def test_parse_coordinate_nan(self, raw):
        """No numeric prefix gives NaN rather than an error."""
        assert math.isnan(parse_coordinate(raw))

    @pytest.mark.parametrize("raw,expected", [
        ("10:00-19:00", ("10:00", "19:00")),
        ("10:00", ("10:00", "")),
        ("", ("", "")),
        ("10:00-12:00-19:00", ("10:00", "12:00-19:00")),
    ])
    def test_split_hours(self, raw: str, expected: tuple):
        """Split once on the dash."""
        assert split_hours(raw) == expected
