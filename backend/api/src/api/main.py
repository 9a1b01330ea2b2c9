"""FastAPI application for the guest declaration API.

Exposes:
- POST /api/gerar-documento: render the responsibility declaration
- GET /api/ping and /api/health: health checks

Deployed behind API Gateway through the Mangum Lambda handler, or run
locally with uvicorn via run_server().
"""

import datetime as dt
from typing import Any

from fastapi import FastAPI
from mangum import Mangum

from api import __version__
from api.exceptions import register_exception_handlers
from api.middleware.correlation import CorrelationIdMiddleware
from api.middleware.cors import CorsHeadersMiddleware
from api.routes.documents import router as documents_router
from api.routes.health import router as health_router
from shared.utils.logging import configure_logging

configure_logging()

app = FastAPI(
    title="Guest Declaration API",
    description="Generates guest responsibility declarations as HTML documents",
    version=__version__,
)

# Added last runs first: correlation ID is set before CORS headers are stamped
app.add_middleware(CorsHeadersMiddleware)
app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)

app.include_router(health_router, prefix="/api")
app.include_router(documents_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Root health check endpoint at /api/ping."""
    return {
        "status": "ok",
        "timestamp": dt.datetime.now(dt.UTC).isoformat(),
        "service": "declaration-api",
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run(
            "api.main:app",
            host=host,
            port=port,
            reload=True,
            reload_dirs=["backend/api/src", "backend/shared/src"],
        )
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
