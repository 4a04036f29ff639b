# -------------------------------------------------------------
# Error taxonomy for the itinerary pipeline
# -------------------------------------------------------------
from typing import Dict, List


class ItineraryError(Exception):
    """Base class for every failure the pipeline reports to the API layer."""


class InvalidItineraryRequest(ItineraryError):
    """The client payload failed validation. Never reaches the model."""

    def __init__(self, form_errors: List[str] = None, field_errors: Dict[str, List[str]] = None):
        self.form_errors = list(form_errors or [])
        self.field_errors = {k: list(v) for k, v in (field_errors or {}).items()}
        super().__init__(self._summary())

    def _summary(self) -> str:
        parts = list(self.form_errors)
        parts += [f"{field}: {'; '.join(msgs)}" for field, msgs in self.field_errors.items()]
        return "Invalid itinerary request: " + (", ".join(parts) or "unknown error")

    @property
    def details(self) -> dict:
        return {"formErrors": self.form_errors, "fieldErrors": self.field_errors}


class UpstreamCallError(ItineraryError):
    """The call to the generative model failed (network, auth, quota, ...)."""


class UpstreamFormatError(ItineraryError):
    """The model answered, but not with a usable itinerary."""

    def __init__(self, message: str, raw_text: str = ""):
        self.raw_text = raw_text
        super().__init__(message)
