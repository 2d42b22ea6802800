"""FastAPI application factory."""

from fastapi import FastAPI, status

from .routes import router, method_not_allowed
from .middleware.logging import LoggingMiddleware


def create_app(service_instance, config) -> FastAPI:
    """Create and configure FastAPI application.

    Every path is a potential identifier, so the docs and OpenAPI routes
    are disabled.

    Args:
        service_instance: Service instance (may be None until lifespan startup)
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Link Redirector",
        description="Minimal URL-shortening service",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(LoggingMiddleware)
    app.add_exception_handler(status.HTTP_405_METHOD_NOT_ALLOWED, method_not_allowed)

    app.include_router(router)

    return app
