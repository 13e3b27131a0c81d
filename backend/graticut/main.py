"""
Main application module for the graticut backend.

This file sets up the FastAPI application, configures CORS so that map
clients can call it from other origins and exposes a simple health
check endpoint.  The cutting router is included under the ``/api``
namespace.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes_cut import router as cut_router


def create_app() -> FastAPI:
    """Factory to create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance.
    """
    app = FastAPI(title="graticut")

    # Allow all origins by default.  In production you should restrict
    # this to the domains that are allowed to access your API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint for monitoring and load balancers.
    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(cut_router, prefix="/api", tags=["cut"])

    return app


# Create the application instance.  Uvicorn will import this when
# running `uvicorn graticut.main:app` from within backend/
app = create_app()
