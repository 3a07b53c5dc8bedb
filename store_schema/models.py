"""
Field-set types shared by the extractor and the schema generators.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterator, Literal

Locale = Literal["en", "fr"]

LOCALES: tuple[str, ...] = ("en", "fr")

FIELD_KEYS: tuple[str, ...] = (
    "name",
    "description",
    "url",
    "telephone",
    "streetAddress",
    "addressLocality",
    "addressRegion",
    "postalCode",
    "addressCountry",
    "latitude",
    "longitude",
    "openingHours_Mo-Fr",
    "openingHours_Sa",
    "openingHours_Su",
)


def check_locale(locale: str) -> str:
    if locale not in LOCALES:
        raise ValueError(f"Unsupported locale {locale!r}; expected one of {', '.join(LOCALES)}.")
    return locale


@dataclass(frozen=True)
class LocalizedValue:
    en: str = ""
    fr: str = ""

    def get(self, locale: str) -> str:
        return getattr(self, check_locale(locale))

    @classmethod
    def from_dict(cls, data: dict) -> "LocalizedValue":
        """A missing or null side becomes an empty string."""
        return cls(
            en="" if data.get("en") is None else str(data["en"]),
            fr="" if data.get("fr") is None else str(data["fr"]),
        )

    def to_dict(self) -> dict:
        return {"en": self.en, "fr": self.fr}


class FieldSet(Mapping):
    """
    Immutable mapping of every known store field to its en/fr pair.
    Construction fails unless exactly the keys in FIELD_KEYS are present.
    """

    def __init__(self, values: Mapping):
        missing = [k for k in FIELD_KEYS if k not in values]
        unknown = [k for k in values if k not in FIELD_KEYS]
        if missing:
            raise ValueError(f"FieldSet is missing fields: {', '.join(missing)}")
        if unknown:
            raise ValueError(f"FieldSet got unknown fields: {', '.join(unknown)}")
        self._values = {}
        for key in FIELD_KEYS:
            value = values[key]
            if isinstance(value, dict):
                value = LocalizedValue.from_dict(value)
            if not isinstance(value, LocalizedValue):
                raise ValueError(f"Field {key!r} must be a LocalizedValue, got {type(value).__name__}")
            self._values[key] = value

    def __getitem__(self, key: str) -> LocalizedValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FieldSet({self._values!r})"

    def replace(self, updates: Mapping) -> "FieldSet":
        """Return a new FieldSet with `updates` applied on top of this one."""
        merged = dict(self._values)
        merged.update(updates)
        return FieldSet(merged)

    def project(self, locale: str) -> dict[str, str]:
        """Flatten to {field: value} for one locale."""
        return {k: v.get(locale) for k, v in self._values.items()}

    def to_dict(self) -> dict:
        return {k: v.to_dict() for k, v in self._values.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "FieldSet":
        return cls(data)
