import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.errors import CatalogError
from catalog.loader import load_catalog
from catalog.models import GeoCatalog
from config import Settings, get_settings
from locations.routes import router as locations_router
from logging_config import setup_logging
from search.routes import router as search_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None, catalog: GeoCatalog = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # catalog must be complete before the first request is served
        if getattr(app.state, "catalog", None) is None:
            app.state.catalog = load_catalog(settings.data_dir)
        yield

    app = FastAPI(title="Geographic Directory API", lifespan=lifespan)
    app.state.catalog = catalog

    # ---- CORS CONFIG ----
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---- ERROR RESPONSES ----
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Something went wrong!"})

    # ---- API ROUTERS ----
    app.include_router(locations_router, prefix="/api")
    app.include_router(search_router, prefix="/api")

    # ---- HEALTH CHECK ----
    @app.get("/")
    def root(request: Request):
        return {"status": "Backend running", "states": len(request.app.state.catalog or ())}

    return app


app = create_app()
