# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Tagged validation results for request payloads.

Handlers validate their input first and branch on the result instead of
catching exceptions for expected, client-correctable mistakes::

    result = validate_payload(LoginRequestDTO, request.get_json(silent=True))
    if isinstance(result, Err):
        raise validation_error_from(result.reason)
    dto = result.value
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from spritehub.shared.errors.validation import format_pydantic_errors

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(slots=True, frozen=True)
class Err:
    reason: dict[str, Any]


Result = Ok[T] | Err


def validate_payload(model: type[ModelT], payload: Any) -> Ok[ModelT] | Err:
    if not isinstance(payload, Mapping):
        return Err({"fields": [], "errors": [{"field": "body", "type": "dict_type"}]})
    try:
        return Ok(model.model_validate(dict(payload)))
    except PydanticValidationError as exc:
        return Err(format_pydantic_errors(exc))


__all__ = ["Err", "Ok", "Result", "validate_payload"]
