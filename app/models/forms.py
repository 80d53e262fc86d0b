# app/models/forms.py
"""
Form validation shared by every entity action.

A submitted form is a flat mapping of field name -> raw string. Validating it
against one of the form schemas yields either ``Ok(record)`` or
``Invalid(errors)``, where ``errors`` maps each failing field to the messages
shown next to it in the UI. Every field is checked; errors are not
short-circuited on the first failure.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

FieldErrors = Dict[str, List[str]]

RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass(frozen=True)
class Ok(Generic[RecordT]):
    record: RecordT


@dataclass(frozen=True)
class Invalid:
    errors: FieldErrors = field(default_factory=dict)


ValidationResult = Union[Ok[RecordT], Invalid]


def field_errors(
    exc: ValidationError,
    messages: Mapping[str, str],
) -> FieldErrors:
    """Collapse a pydantic ValidationError into a field -> messages map.

    Fields listed in ``messages`` get their fixed user-facing text; anything
    else falls back to pydantic's own message.
    """
    errors: FieldErrors = {}
    for err in exc.errors():
        name = str(err["loc"][0]) if err["loc"] else "__root__"
        text = messages.get(name, err["msg"])
        bucket = errors.setdefault(name, [])
        if text not in bucket:
            bucket.append(text)
    return errors


def validate_form(
    schema: Type[RecordT],
    raw: Mapping[str, Optional[str]],
    messages: Mapping[str, str],
) -> ValidationResult:
    try:
        record = schema.model_validate(dict(raw))
    except ValidationError as exc:
        return Invalid(errors=field_errors(exc, messages))
    return Ok(record=record)
