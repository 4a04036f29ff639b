import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from itinerary_planner.errors import (
    InvalidItineraryRequest,
    UpstreamCallError,
    UpstreamFormatError,
)
from itinerary_planner.schemas.itinerary_schema import (
    ErrorResponse,
    Itinerary,
    ValidationErrorResponse,
)
from itinerary_planner.services.itinerary_service import ItineraryGenerator
from itinerary_planner.services.request_validator import validate_request

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input."
INVALID_FORMAT_MESSAGE = "The AI returned an invalid response format. Please try again."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."

router = APIRouter(tags=["AI Itinerary"])


def get_generator(request: Request) -> ItineraryGenerator:
    """The generator is built once in the app lifespan and shared by all requests."""
    return request.app.state.generator


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


@router.post(
    "/generate",
    response_model=Itinerary,
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def generate_itinerary(request: Request, generator: ItineraryGenerator = Depends(get_generator)):
    """
    Endpoint to generate an AI-powered itinerary.
    Body: {"city": str, "budget": str, "days": int}
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _error(400, INVALID_INPUT_MESSAGE,
                      details={"formErrors": ["Request body must be valid JSON."], "fieldErrors": {}})

    try:
        req = validate_request(body)
        return await generator.generate(req)
    except InvalidItineraryRequest as ie:
        logger.info(f"Rejected itinerary request: {ie}")
        return _error(400, INVALID_INPUT_MESSAGE, details=ie.details)
    except UpstreamFormatError:
        return _error(502, INVALID_FORMAT_MESSAGE)
    except UpstreamCallError:
        return _error(500, INTERNAL_ERROR_MESSAGE)
