import os
import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from ppe_tracker.database import create_db_engine, create_session_factory, init_db
from ppe_tracker.routers import (
    auth_router,
    equipment_router,
    equipment_type_router,
    inspection_router,
    inspection_status_router,
    manager_router,
)
from ppe_tracker.services.errors import ServiceError
from ppe_tracker.utils import error_resp

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn.error")

APP_ENV = os.getenv("APP_ENV", "development")
SERVER_PORT = int(os.getenv("SERVER_PORT", 5500))
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")

# Operations that take an Authorization: Bearer header
SECURED_PATHS = {"/api/auth/me"}


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {err.get('msg')}")
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    # Exception handlers to return uniform error shape
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        msg = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return error_resp(msg or "Error", exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_resp(_validation_message(exc), 400, {"errors": exc.errors()})

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError):
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return error_resp(exc.message, exc.status_code)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        if APP_ENV == "production":
            return error_resp("Internal server error", 500)
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return error_resp("Internal server error", 500, {"error": str(exc), "trace": trace})


def install_openapi(app: FastAPI) -> None:
    def custom_openapi():
        # Return cached schema if already generated
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=app.title,
            version=app.version,
            description=getattr(app, "description", None),
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {}).setdefault("securitySchemes", {})
        openapi_schema["components"]["securitySchemes"]["BearerAuth"] = {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
        for path, path_item in openapi_schema.get("paths", {}).items():
            if path not in SECURED_PATHS:
                continue
            for operation in path_item.values():
                if isinstance(operation, dict):
                    operation.setdefault("security", []).append({"BearerAuth": []})

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the API around an explicitly constructed engine (a default one from env when omitted)."""
    engine = engine or create_db_engine()
    session_factory = create_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine, session_factory)
        yield
        engine.dispose()

    app = FastAPI(title="PPE Tracker API", version="1.0.0", description="PPE inventory and inspection tracking", lifespan=lifespan)
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(equipment_type_router.router)
    app.include_router(manager_router.router)
    app.include_router(inspection_status_router.router)
    app.include_router(equipment_router.router)
    app.include_router(inspection_router.router)
    app.include_router(auth_router.router)

    register_exception_handlers(app)
    install_openapi(app)

    @app.get("/")
    def root():
        return {"message": "PPE Tracker API is running"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=SERVER_PORT)
