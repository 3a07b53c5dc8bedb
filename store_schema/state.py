"""
Form state for the generator page and the reducer that drives it.

The page keeps one FormState in the Streamlit session and replaces it on
every action; widgets only ever render the current state.
"""
import logging
from dataclasses import dataclass, replace
from typing import Callable, Union

from store_schema.extractors.sheet import extract_fields
from store_schema.generators.store import build
from store_schema.generators.template import render
from store_schema.models import FieldSet
from store_schema.utils.clipboard import COPY_FAILURE, COPY_SUCCESS

logger = logging.getLogger(__name__)

# Returns True only when the write is known to have succeeded.
ClipboardWriter = Callable[[str], bool | None]


@dataclass(frozen=True)
class FormState:
    input_text: str = ""
    output: str = ""
    error: str = ""
    notice: str = ""
    extraction: str = ""
    store_name: str = ""


@dataclass(frozen=True)
class EditInput:
    text: str


@dataclass(frozen=True)
class Generate:
    defaults: FieldSet | None = None


@dataclass(frozen=True)
class CopyOutput:
    writer: ClipboardWriter


Action = Union[EditInput, Generate, CopyOutput]


def reduce(state: FormState, action: Action) -> FormState:
    """Apply one user action and return the next state."""
    if isinstance(action, EditInput):
        return replace(state, input_text=action.text, notice="")

    if isinstance(action, Generate):
        try:
            result = extract_fields(state.input_text, action.defaults)
            output = render(build(result.fields, "en"), build(result.fields, "fr"))
        except Exception as e:
            logger.exception("Schema generation failed")
            return replace(state, error=f"Error generating schema: {e}", notice="")
        return replace(
            state,
            output=output,
            error="",
            notice="",
            extraction=result.status.value,
            store_name=result.fields["name"].en,
        )

    if isinstance(action, CopyOutput):
        if not state.output:
            return state
        try:
            confirmed = action.writer(state.output)
        except Exception as e:
            logger.exception("Clipboard write failed")
            return replace(state, error=f"{COPY_FAILURE}{e}", notice="")
        return replace(state, error="", notice=COPY_SUCCESS if confirmed is True else "")

    raise TypeError(f"Unknown action {type(action).__name__}")
