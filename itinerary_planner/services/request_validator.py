from typing import Any, Dict, List
from pydantic import ValidationError

from itinerary_planner.errors import InvalidItineraryRequest
from itinerary_planner.schemas.itinerary_schema import ItineraryRequest, MIN_DAYS, MAX_DAYS

_LABELS = {"city": "City", "budget": "Budget", "days": "Days"}

_DAYS_NOT_INTEGER = {"int_type", "int_parsing", "int_from_float", "value_error"}


def _message_for(field: str, error: dict) -> str:
    """Turn one pydantic error into the user-facing message for that field."""
    kind = error["type"]
    label = _LABELS.get(field, field.capitalize())

    if kind == "missing":
        return "Required"
    if kind == "string_too_short":
        return f"{label} cannot be empty."
    if kind == "string_type":
        return f"{label} must be a string."
    if kind == "greater_than_equal":
        return f"Days must be at least {MIN_DAYS}."
    if kind == "less_than_equal":
        return f"Days cannot exceed {MAX_DAYS}."
    if field == "days" and kind in _DAYS_NOT_INTEGER:
        return "Days must be a whole number."
    return error["msg"]


def validate_request(raw: Any) -> ItineraryRequest:
    """
    Validate an untyped payload (usually a parsed JSON body) into an ItineraryRequest.
    Every failing field is reported at once via InvalidItineraryRequest.
    """
    if not isinstance(raw, dict):
        raise InvalidItineraryRequest(form_errors=["Expected a JSON object."])

    try:
        return ItineraryRequest.model_validate(raw)
    except ValidationError as exc:
        field_errors: Dict[str, List[str]] = {}
        form_errors: List[str] = []
        for error in exc.errors():
            if not error["loc"]:
                form_errors.append(error["msg"])
                continue
            field = str(error["loc"][0])
            field_errors.setdefault(field, []).append(_message_for(field, error))
        raise InvalidItineraryRequest(form_errors=form_errors, field_errors=field_errors) from exc
