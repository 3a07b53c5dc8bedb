"""
Marker-based extraction of store fields from text pasted out of the store sheet.

The sheet export has no delimiters; each field is found between two literal
column labels (e.g. everything between "name" and "description"), then cut
into English and French parts. The rules below are tuned for that one
export format and nothing else.
"""
import enum
import logging
import re
from dataclasses import dataclass
from typing import Callable

from store_schema.config import load_default_fields
from store_schema.models import FieldSet, LocalizedValue

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"https://\S+")


class ExtractionStatus(enum.Enum):
    EMPTY = "empty"
    PARSED = "parsed"
    UNMATCHED = "unmatched"
    FAILED = "failed"


@dataclass(frozen=True)
class ExtractionResult:
    fields: FieldSet
    status: ExtractionStatus
    matched: tuple[str, ...] = ()


def split_on_keyword(keyword: str) -> Callable[[str], LocalizedValue]:
    """
    Cut a segment just before `keyword`: the English part is what comes
    before it, the French part runs from the keyword to its next occurrence.
    A keyword at the very start of the segment is not a boundary.
    """
    pattern = re.compile(re.escape(keyword))

    def splitter(segment: str) -> LocalizedValue:
        bounds = [m.start() for m in pattern.finditer(segment) if m.start() > 0]
        if not bounds:
            return LocalizedValue(en=segment.strip(), fr="")
        end = bounds[1] if len(bounds) > 1 else len(segment)
        return LocalizedValue(
            en=segment[:bounds[0]].strip(),
            fr=segment[bounds[0]:end].strip(),
        )

    return splitter


def split_urls(segment: str) -> LocalizedValue:
    """First https URL is English, second is French."""
    urls = URL_PATTERN.findall(segment)
    return LocalizedValue(
        en=urls[0] if urls else "",
        fr=urls[1] if len(urls) > 1 else "",
    )


@dataclass(frozen=True)
class MarkerRule:
    field: str
    start: str
    end: str
    splitter: Callable[[str], LocalizedValue]

    def apply(self, text: str) -> LocalizedValue | None:
        """Split the first start…end span, or None when the span is absent."""
        match = re.search(re.escape(self.start) + r"(.*?)" + re.escape(self.end), text, re.DOTALL)
        if not match:
            return None
        return self.splitter(match.group(1))


MARKER_RULES: tuple[MarkerRule, ...] = (
    MarkerRule("name", "name", "description", split_on_keyword("Magasin")),
    MarkerRule("description", "description", "url", split_on_keyword("Votre")),
    MarkerRule("url", "url", "image", split_urls),
)


def extract_fields(
    raw_text: str,
    defaults: FieldSet | None = None,
    rules: tuple[MarkerRule, ...] = MARKER_RULES,
) -> ExtractionResult:
    """
    Run every marker rule over `raw_text` on top of `defaults`.
    Never raises: an unexpected error yields the defaults with status FAILED.
    """
    if defaults is None:
        defaults = load_default_fields()

    if not raw_text or not raw_text.strip():
        return ExtractionResult(defaults, ExtractionStatus.EMPTY)

    try:
        updates = {}
        for rule in rules:
            value = rule.apply(raw_text)
            if value is not None:
                updates[rule.field] = value
        fields = defaults.replace(updates)
    except Exception:
        logger.exception("Sheet data extraction failed; using default fields")
        return ExtractionResult(defaults, ExtractionStatus.FAILED)

    matched = tuple(updates)
    status = ExtractionStatus.PARSED if matched else ExtractionStatus.UNMATCHED
    logger.debug("Extraction %s, matched fields: %s", status.value, ", ".join(matched) or "none")
    return ExtractionResult(fields, status, matched)


def extract(raw_text: str, defaults: FieldSet | None = None) -> FieldSet:
    return extract_fields(raw_text, defaults).fields
