from datetime import datetime
from typing import Optional
import logging
import time
import uuid

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fintrack.api.endpoints import bank, statistics, transactions, upload
from fintrack.api.state import AppState
from fintrack.common.config import Settings, load_settings
from fintrack.common.logging_config import get_logger, set_request_id, setup_logging

logger = get_logger("api.main")

REQUEST_ID_HEADER = "X-Request-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def create_app(settings: Optional[Settings] = None, configure_logging: bool = True) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Explicit settings (defaults to load_settings())
        configure_logging: Install the JSON logging handlers
    """
    settings = settings or load_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title="Finance Tracker API", version="1.0.0")
    app.state.finance = AppState.from_settings(settings)

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        # An inbound id wins over a generated one
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        set_request_id(request_id)
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"{route} failed", error=str(e), elapsed_ms=_elapsed_ms(started), exc_info=True)
            raise
        else:
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(level, f"{route} -> {response.status_code}",
                       status_code=response.status_code, elapsed_ms=_elapsed_ms(started),
                       client=request.client.host if request.client else None)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            set_request_id(None)

    # The frontend reads failures from an "error" field
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail, "detail": exc.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Request validation failed.", errors=str(exc.errors()))
        return JSONResponse(
            status_code=422,
            content={"success": False, "error": "Data tidak valid", "detail": jsonable_encoder(exc.errors())},
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include Routers
    app.include_router(transactions.router, prefix="/api/transactions", tags=["Transactions"])
    app.include_router(statistics.router, prefix="/api/statistics", tags=["Statistics"])
    app.include_router(upload.router, prefix="/api/upload", tags=["Upload"])
    app.include_router(bank.router, prefix="/api", tags=["Bank"])

    @app.get("/")
    def root():
        return {"message": "Finance Tracker API is running!", "status": "OK"}

    @app.get("/health")
    def health_check(request: Request):
        store = request.app.state.finance.store
        return {
            "status": "OK",
            "timestamp": datetime.now().isoformat(),
            "transactions": store.count(),
        }

    return app


if __name__ == "__main__":
    import uvicorn
    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
