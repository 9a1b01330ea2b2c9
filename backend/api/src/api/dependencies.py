"""Service providers for the API layer.

Services are lazily instantiated and cached with @lru_cache so the Jinja2
environment is built once per process. The document route resolves the
renderer inside its error handling, so a misconfigured environment (for
example an unknown DOCUMENT_TIMEZONE) surfaces as the JSON 500 body.

Usage in routes:
    from api.dependencies import get_document_renderer

    renderer = get_document_renderer()

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from shared.services.document_renderer import DocumentRenderer


@lru_cache
def get_document_renderer() -> DocumentRenderer:
    """Get cached DocumentRenderer configured from the environment."""
    return DocumentRenderer()


def reset_services() -> None:
    """Clear all cached service instances."""
    get_document_renderer.cache_clear()
