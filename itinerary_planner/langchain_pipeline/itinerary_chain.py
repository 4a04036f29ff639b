import logging
import re

from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable
from langchain_google_genai import ChatGoogleGenerativeAI

from itinerary_planner.config import Settings
from itinerary_planner.schemas.itinerary_schema import ItineraryRequest
from .itinerary_prompt import itinerary_prompt

logger = logging.getLogger(__name__)

# Leading fence (optionally tagged json) or trailing fence, anchored to the whole text
_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


# ------------------------------------------------------------
# Helper: strip markdown fences the model sometimes adds
# ------------------------------------------------------------
def sanitize_model_output(text: str) -> str:
    """
    Remove a leading ```json fence and a trailing ``` fence, plus surrounding whitespace.
    Already-clean text comes back unchanged.
    """
    if not text:
        return ""
    return _FENCE_RE.sub("", text.strip()).strip()


def build_prompt(req: ItineraryRequest) -> str:
    return itinerary_prompt.format(city=req.city, budget=req.budget, days=req.days)


# ------------------------------------------------------------
# Gemini client (built once per process, injected into the generator)
# ------------------------------------------------------------
def create_gemini_llm(settings: Settings) -> ChatGoogleGenerativeAI:
    if not settings.GEMINI_API_KEY:
        raise ValueError("GEMINI_API_KEY is not set. Add it to the environment or .env file.")

    logger.info(f"Initializing Gemini model {settings.GEMINI_MODEL}")
    return ChatGoogleGenerativeAI(
        model=settings.GEMINI_MODEL,
        temperature=settings.GEMINI_TEMPERATURE,
        google_api_key=settings.GEMINI_API_KEY,
        max_retries=settings.GEMINI_MAX_RETRIES,
    )


def build_itinerary_chain(llm: Runnable) -> Runnable:
    """model -> plain text. Invoked with a ready prompt string: one prompt, one completion."""
    return llm | StrOutputParser()
