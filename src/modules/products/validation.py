"""Request body validation for the Product resource.

``validate_product`` and ``validate_price_update`` are the single entry
points used by the service before any store mutation.  They never raise:
the outcome is ``Success(dto)`` or ``ValidationFailed`` carrying a map of
wire field name -> messages, e.g.::

    {"Name": ["The Name field is required."],
     "Price": ["The field Price must be a number."]}

Incoming field names are matched case-insensitively, so ``name`` binds to
``Name``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.products.dtos import PriceUpdateDTO, ProductInputDTO
from modules.products.models import NAME_MAX_LENGTH, PRICE_DECIMAL_PLACES
from shared.domain.results import Result, Success, ValidationFailed

D = TypeVar("D", bound=BaseModel)

WIRE_FIELDS = ("Id", "Name", "Price", "Description")

NULL_BODY_ERRORS = {"Product": ["Product data cannot be null."]}
ID_MISMATCH_MESSAGE = "The Id in the body does not match the Id in the URL."

_NUMBER_ERROR_TYPES = {
    "decimal_parsing",
    "decimal_type",
    "finite_number",
}
_RANGE_ERROR_TYPES = {
    "decimal_max_digits",
    "decimal_whole_digits",
}


def normalize_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Rename keys matching a wire field case-insensitively to that field."""
    canonical = {name.lower(): name for name in WIRE_FIELDS}
    normalized: Dict[str, Any] = {}
    for key, value in payload.items():
        normalized[canonical.get(str(key).lower(), key)] = value
    return normalized


def body_id_matches(payload: Dict[str, Any], id: int, required: bool) -> bool:
    """Compare the ``Id`` embedded in a normalized body with the path id.

    A missing ``Id`` counts as a mismatch only when ``required``.
    """
    if "Id" not in payload:
        return not required
    body_id = payload["Id"]
    if isinstance(body_id, bool) or not isinstance(body_id, int):
        return False
    return body_id == id


def _message_for(field: str, error: Dict[str, Any]) -> str:
    kind = error["type"]
    if kind == "missing" or error.get("input", ...) is None:
        return f"The {field} field is required."
    if kind == "string_type":
        return f"The field {field} must be a string."
    if kind == "string_too_long":
        return (
            f"The field {field} must be a string with a maximum length of "
            f"{NAME_MAX_LENGTH}."
        )
    if kind in _NUMBER_ERROR_TYPES:
        return f"The field {field} must be a number."
    if kind == "decimal_max_places":
        return (
            f"The field {field} must have at most {PRICE_DECIMAL_PLACES} "
            "decimal places."
        )
    if kind in _RANGE_ERROR_TYPES:
        return f"The field {field} is out of range."
    if kind == "value_error":
        return str(error["ctx"]["error"])
    return error["msg"]


def _field_errors(exc: PydanticValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "Product"
        errors.setdefault(field, []).append(_message_for(field, error))
    return errors


def _validate(dto_class: Type[D], payload: Any) -> Result[D]:
    if not isinstance(payload, dict):
        return ValidationFailed(errors=dict(NULL_BODY_ERRORS))
    try:
        dto = dto_class.model_validate(normalize_payload(payload))
    except PydanticValidationError as exc:
        return ValidationFailed(errors=_field_errors(exc))
    return Success(dto)


def validate_product(payload: Any) -> Result[ProductInputDTO]:
    """Validate a full Product body (POST, PUT)."""
    return _validate(ProductInputDTO, payload)


def validate_price_update(payload: Any) -> Result[PriceUpdateDTO]:
    """Validate a PATCH body; only ``Price`` is checked."""
    return _validate(PriceUpdateDTO, payload)
