import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from docmeta.config import VERSION
from docmeta.logging_config import configure_logging
from docmeta.ratelimit import limiter
from docmeta.routers.describe import router as describe_router
from docmeta.routers.process import router as process_router

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="docmeta – Documentation Meta Tagger",
    description="Injects description and Open Graph meta tags into generated documentation pages.",
    version=VERSION,
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(process_router)
app.include_router(describe_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from docmeta"}
