"""
Liquid template output: both locale schemas behind a locale conditional.
"""
from store_schema.config import LOCALE_CONDITION
from store_schema.extractors.sheet import extract
from store_schema.generators.store import build
from store_schema.models import FieldSet
from store_schema.utils.helpers import format_json, wrap_in_script_tag


def render(en_schema: dict, fr_schema: dict) -> str:
    """Emit the English block when the storefront locale is 'en', else the French one."""
    return "\n".join([
        f"{{% if {LOCALE_CONDITION} == 'en' %}}",
        wrap_in_script_tag(format_json(en_schema)),
        "{% else %}",
        wrap_in_script_tag(format_json(fr_schema)),
        "{% endif %}",
    ])


def generate(raw_text: str, defaults: FieldSet | None = None) -> str:
    fields = extract(raw_text, defaults)
    return render(build(fields, "en"), build(fields, "fr"))
