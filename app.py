from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from json_codec import DEFAULT_CODEC, JsonCodec
from logging_config import setup_logging
from persistence import DocumentStore, InMemoryDocumentStore, ThreadedResourceRepository
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    store: DocumentStore | None = None,
    codec: JsonCodec | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    load_dotenv("local.env")
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    from endpoints.errors import install_error_handlers
    from endpoints.resources import router as resources_router
    from middleware import request_logging_middleware_factory

    prefix = settings.api_prefix
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        docs_url=f"{prefix}/docs",
        openapi_url=f"{prefix}/openapi.json",
        redoc_url=None,
    )

    # An empty store is falsy (len 0), so test for None explicitly.
    if store is None:
        store = InMemoryDocumentStore()
    app.state.repository = ThreadedResourceRepository(store)
    app.state.codec = codec if codec is not None else DEFAULT_CODEC

    if settings.log_requests:
        app.middleware("http")(request_logging_middleware_factory())

    install_error_handlers(app)
    app.include_router(resources_router, prefix=prefix)

    logger.info("resource API ready under %s/resources", prefix or "/")
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
