# -------------------------------------------------------------
# AI Itinerary Planner: FastAPI Entrypoint
# -------------------------------------------------------------
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from itinerary_planner.api.itinerary_router import INTERNAL_ERROR_MESSAGE, router as itinerary_router
from itinerary_planner.config import settings
from itinerary_planner.langchain_pipeline.itinerary_chain import create_gemini_llm
from itinerary_planner.logging_config import setup_logging
from itinerary_planner.services.itinerary_service import ItineraryGenerator

setup_logging()
logger = logging.getLogger(__name__)


# -------------------------------------------------------------
# Lifespan: build the Gemini client once per process
# -------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting itinerary planner (env={settings.ENV})")
    try:
        llm = create_gemini_llm(settings)
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        raise RuntimeError(f"Gemini initialization failed: {e}") from e

    app.state.generator = ItineraryGenerator(llm, strict=settings.ITINERARY_STRICT_VALIDATION)
    logger.info("Itinerary generator ready.")

    yield

    logger.info("Shutting down itinerary planner.")


# -------------------------------------------------------------
# Initialize FastAPI App
# -------------------------------------------------------------
app = FastAPI(
    title="AI Itinerary Planner",
    description="Generates day-by-day travel itineraries with Gemini",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(itinerary_router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


# -------------------------------------------------------------
# Health Check
# -------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


def run():
    uvicorn.run("itinerary_planner.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
