"""
HTTP API for the reference code scraper.

POST /api/properties/extract   extract the reference code of a listing URL
GET  /api/properties/portals   list supported portals
GET  /api/properties/health    health check
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import APP_ENV, APP_NAME, APP_VERSION, LOG_LEVEL, LOG_TO_FILE
from main import ReferenceCodeScraper
from utils.logging_config import configure_api_logging, get_api_logger

logger = get_api_logger("server")


class ExtractRequest(BaseModel):
    url: Optional[str] = None


def get_scraper(request: Request) -> ReferenceCodeScraper:
    return request.app.state.scraper


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the scraper on startup and release the browser on shutdown."""
    configure_api_logging(log_level=LOG_LEVEL, log_to_file=LOG_TO_FILE)
    if getattr(app.state, "scraper", None) is None:
        app.state.scraper = ReferenceCodeScraper()
    logger.info(f"{APP_NAME} v{APP_VERSION} started (env={APP_ENV})")
    try:
        yield
    finally:
        logger.info("Shutting down, closing browser pool")
        await app.state.scraper.shutdown()


router = APIRouter(prefix="/api/properties")


@router.post("/extract")
async def extract(request: Request):
    try:
        try:
            body = ExtractRequest.model_validate(await request.json())
        except Exception:
            body = ExtractRequest()

        if not body.url:
            return JSONResponse(status_code=400, content={"success": False, "error": "URL is required"})

        logger.info(f"Received extraction request: url={body.url}")
        result = await get_scraper(request).scrape_property(body.url)
        return JSONResponse(status_code=200 if result.success else 400, content=result.to_dict())
    except Exception as e:
        logger.error(f"Error in /api/properties/extract: {e}")
        return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})


@router.get("/portals")
async def portals(request: Request):
    return {"success": True, "data": get_scraper(request).get_supported_portals()}


@router.get("/health")
async def health():
    return {
        "success": True,
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def create_app(scraper: Optional[ReferenceCodeScraper] = None) -> FastAPI:
    """Build the FastAPI application; pass a scraper to override the default one."""
    app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)
    app.state.scraper = scraper

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} "
                    f"({(time.time() - start) * 1000:.0f}ms)")
        return response

    @app.get("/")
    async def root():
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "endpoints": {
                "POST /api/properties/extract": "Extract reference code from a property URL",
                "GET /api/properties/portals": "Get list of supported portals",
                "GET /api/properties/health": "Health check",
            },
        }

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"success": False, "error": "Endpoint not found"})
        return JSONResponse(status_code=exc.status_code, content={"success": False, "error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"success": False, "error": "Invalid request"})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error(f"Unhandled error: {exc}")
        return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})

    app.include_router(router)
    return app


app = create_app()
