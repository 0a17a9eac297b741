from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from travel_ai.api.dependencies import get_chat_endpoint, get_repository
from travel_ai.api.routes_itinerary import router as itinerary_router
from travel_ai.core.config_loader import settings
from travel_ai.core.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Travel Itinerary API ({settings.environment})")
    yield
    if get_chat_endpoint.cache_info().currsize:
        await get_chat_endpoint().close()
    if get_repository.cache_info().currsize:
        get_repository().close()


# Interactive docs only while developing
app = FastAPI(
    title="AI Travel Itinerary API",
    description="Generates structured travel itineraries with OpenAI and stores every generation",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    openapi_url="/openapi.json" if settings.is_development else None,
)

# -------------------------------------------------------------
# CORS
# -------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------------------------------------
# VALIDATION ERRORS → 400
# -------------------------------------------------------------
def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) if parts else "request"


def _clean_message(msg: str) -> str:
    prefix = "Value error, "
    return msg[len(prefix):] if msg.startswith(prefix) else msg


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for err in exc.errors():
        errors.setdefault(_field_name(err.get("loc", ())), []).append(_clean_message(err.get("msg", "")))

    logger.warning(f"Invalid travel request received: {errors}")
    return JSONResponse(
        status_code=400,
        content={
            "title": "One or more validation errors occurred.",
            "status": 400,
            "errors": errors,
        },
    )


# -------------------------------------------------------------
# ROUTES
# -------------------------------------------------------------
app.include_router(itinerary_router)


@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Travel Itinerary API is running",
        "env": settings.environment
    }


# -------------------------------------------------------------
# RUN LOCAL
# -------------------------------------------------------------
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development
    )
