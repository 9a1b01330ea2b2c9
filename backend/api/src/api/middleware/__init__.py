"""HTTP middleware for the document API."""

from api.middleware.correlation import CorrelationIdMiddleware
from api.middleware.cors import CorsHeadersMiddleware

__all__ = ["CorrelationIdMiddleware", "CorsHeadersMiddleware"]
