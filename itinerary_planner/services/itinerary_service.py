import logging

from langchain_core.runnables import Runnable
from pydantic import ValidationError

from itinerary_planner.errors import UpstreamCallError, UpstreamFormatError
from itinerary_planner.langchain_pipeline.itinerary_chain import (
    build_itinerary_chain,
    build_prompt,
    sanitize_model_output,
)
from itinerary_planner.schemas.itinerary_schema import Itinerary, ItineraryRequest

logger = logging.getLogger(__name__)


class ItineraryGenerator:
    """
    Turns a validated request into an Itinerary with a single model call.

    The model client is injected so the hosting process owns its lifecycle.
    With strict=True the parsed itinerary must also be internally consistent
    (see Itinerary.consistency_problems); otherwise the model's structure is trusted.
    """

    def __init__(self, llm: Runnable, strict: bool = True):
        self.chain = build_itinerary_chain(llm)
        self.strict = strict

    async def _call_model(self, req: ItineraryRequest) -> str:
        try:
            return await self.chain.ainvoke(build_prompt(req))
        except Exception as e:
            logger.error(f"Gemini call failed for {req.city}: {e}", exc_info=True)
            raise UpstreamCallError(f"Model call failed: {e}") from e

    def parse(self, raw_text: str) -> Itinerary:
        text = sanitize_model_output(raw_text)
        try:
            itinerary = Itinerary.model_validate_json(text, strict=True)
        except ValidationError as e:
            logger.error(f"JSON parsing error: {e}")
            logger.error(f"--- Raw text from Gemini ---\n{text}\n----------------------------")
            raise UpstreamFormatError("Model output is not a valid itinerary", raw_text=text) from e

        if self.strict:
            problems = itinerary.consistency_problems()
            if problems:
                logger.error(f"Inconsistent itinerary from Gemini: {'; '.join(problems)}")
                logger.error(f"--- Raw text from Gemini ---\n{text}\n----------------------------")
                raise UpstreamFormatError("; ".join(problems), raw_text=text)

        return itinerary

    async def generate(self, req: ItineraryRequest) -> Itinerary:
        logger.info(f"Generating {req.days}-day itinerary for {req.city}")
        raw_text = await self._call_model(req)
        itinerary = self.parse(raw_text)
        logger.info(f"Itinerary for {req.city} ready ({len(itinerary.itinerary)} days)")
        return itinerary
