from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
import logging
import sys
import time
from typing import Callable

from app.api.errors import register_exception_handlers
from app.api.v1.api import api_router
from app.core.config import settings

# Keep reload watcher logs quiet
logging.getLogger('watchfiles').setLevel(logging.ERROR)
logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="In-memory student and course registry API"
)

# CORS must be added before other middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Link"]
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next: Callable) -> Response:
    """Log method, path, status and duration of every request"""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
