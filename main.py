import asyncio
import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Config
from logger_setup import install_exception_hooks, log_unhandled_async_error, setup_logging
from middleware import (
    ErrorEnvelopeMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    StoreGateMiddleware,
)
from models.request import REQUIRED_FIELDS
from routes import docs, health_router, nft_router
from service.errors import NftServiceError
from service.nft_repository import NftRepository
from service.store import MongoStore

setup_logging()
install_exception_hooks()

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


def create_app(config=Config, store: MongoStore = None) -> FastAPI:
    store = store or MongoStore(
        uri=config.mongo_uri(),
        db_name=config.DB_NAME,
        max_attempts=config.DB_CONNECT_RETRIES,
        delay=config.DB_CONNECT_DELAY,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        asyncio.get_running_loop().set_exception_handler(log_unhandled_async_error)
        await store.connect()
        await NftRepository(store.collection(config.NFT_COLLECTION)).ensure_indexes()
        logger.info(f"Server is running on port: {config.PORT}")
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        **docs.API_INFO,
        docs_url=docs.DOCS_URL,
        redoc_url=docs.REDOC_URL,
        servers=docs.servers(config.PORT),
        lifespan=lifespan,
    )
    app.state.store = store

    # Starlette runs the last-added middleware first.
    app.add_middleware(ErrorEnvelopeMiddleware)
    app.add_middleware(StoreGateMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=config.CORS_METHODS,
        allow_headers=config.CORS_HEADERS,
    )

    @app.exception_handler(NftServiceError)
    async def service_error_handler(request: Request, exc: NftServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return _error_response(400, f"All fields are required: {', '.join(REQUIRED_FIELDS)}")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error: {exc}", exc_info=exc)
        return _error_response(500, "An unexpected error occurred")

    app.include_router(health_router)
    app.include_router(nft_router)

    return app


app = create_app()


def main() -> None:
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=Config.HOST,
            port=Config.PORT,
            log_level=Config.LOG_LEVEL.lower(),
        )
    )
    server.run()
    if not server.started:
        logger.error("Failed to start server")
        sys.exit(1)
    logger.info("Server stopped")


if __name__ == "__main__":
    main()
