import json
import math
import re


def slugify(text: str) -> str:
    """Convert text to URL-safe slug."""
    text = text.lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"-+", "-", text)
    return text.strip("-")


def json_numbers(value):
    """
    Recursively rewrite floats for JSON output: NaN and infinities become
    None, and whole numbers below 1e21 lose their ".0". Larger values and
    tiny ones keep Python's exponent form (1e+21, 1e-07).
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < 1e21:
            return int(value)
        return value
    if isinstance(value, dict):
        return {k: json_numbers(v) for k, v in value.items()}
    if isinstance(value, list):
        return [json_numbers(v) for v in value]
    return value


def format_json(data: dict) -> str:
    """Serialize schema dict to pretty-printed JSON string."""
    return json.dumps(json_numbers(data), indent=2, ensure_ascii=False, allow_nan=False)


def wrap_in_script_tag(json_str: str) -> str:
    """Wrap JSON-LD in HTML script tag."""
    return f'<script type="application/ld+json">\n{json_str}\n</script>'
