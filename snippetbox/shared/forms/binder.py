# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo

from snippetbox.shared.errors import FormBindingError
from snippetbox.shared.validation import Validator

F = TypeVar("F", bound=BaseModel)


@dataclass(slots=True)
class FormState(Generic[F]):  # noqa: UP046
    values: F
    validation: Validator = field(default_factory=Validator)


def _is_sequence_field(info: FieldInfo) -> bool:
    origin = typing.get_origin(info.annotation)
    return origin in (list, tuple, set, frozenset)


def _values_for(data: Mapping[str, Any], key: str) -> list[Any]:
    getlist = getattr(data, "getlist", None)
    if getlist is not None:
        return list(getlist(key))
    raw = data[key]
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return [raw]


def _first_error(exc: PydanticValidationError) -> tuple[str, str]:
    error = exc.errors()[0]
    loc = ".".join(str(part) for part in error.get("loc", ()) if part is not None)
    return loc or "unknown", error.get("type", "value_error")


def decode_post_form(
    form_cls: type[F],
    data: Mapping[str, Any],
    *,
    field_map: Mapping[str, str] | None = None,
) -> F:
    """Bind submitted form values onto ``form_cls``.

    Each model field reads from its alias (or its own name). ``field_map``
    overrides that with explicit source-name -> attribute pairs. Fields
    declared with ``exclude=True`` are not bindable and never read from the
    submission; unknown submitted keys are ignored.

    Raises :class:`FormBindingError` when the target is not a form model, when
    a mapped attribute does not exist on it, or when a value cannot be
    converted to the declared type.
    """
    if not (isinstance(form_cls, type) and issubclass(form_cls, BaseModel)):
        raise FormBindingError("target is not a bindable form class")

    fields = form_cls.model_fields
    sources: dict[str, str] = {}
    for name, info in fields.items():
        if info.exclude:
            continue
        sources[info.alias or name] = name

    for source, attribute in (field_map or {}).items():
        if attribute not in fields:
            raise FormBindingError("unknown target field", field=attribute)
        if fields[attribute].exclude:
            raise FormBindingError("target field is not bindable", field=attribute)
        sources = {k: v for k, v in sources.items() if v != attribute}
        sources[source] = attribute

    payload: dict[str, Any] = {}
    for source, attribute in sources.items():
        if source not in data:
            continue
        values = _values_for(data, source)
        if _is_sequence_field(fields[attribute]):
            payload[fields[attribute].alias or attribute] = values
        elif values:
            payload[fields[attribute].alias or attribute] = values[0]

    try:
        return form_cls.model_validate(payload)
    except PydanticValidationError as exc:
        field_name, error_type = _first_error(exc)
        raise FormBindingError(error_type, field=field_name) from exc


__all__ = ["FormState", "decode_post_form"]
