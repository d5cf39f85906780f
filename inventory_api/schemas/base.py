# File: inventory_api/schemas/base.py

from typing import Annotated, Type, TypeVar

import pydantic
from pydantic import BaseModel, StringConstraints

from inventory_api.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Required, trimmed, non-empty string
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class MessageResponse(BaseModel):
    message: str


def format_errors(errors) -> str:
    """Render pydantic error dicts as "field: message; field: message"."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def validate(model: Type[ModelT], data: dict) -> ModelT:
    """
    Validate service input against a schema.

    Keys whose value is None are treated as missing, so defaults apply and
    required fields report "Field required". Raises ValidationError.
    """
    values = {k: v for k, v in data.items() if v is not None}
    try:
        return model.model_validate(values)
    except pydantic.ValidationError as exc:
        raise ValidationError(format_errors(exc.errors())) from exc
