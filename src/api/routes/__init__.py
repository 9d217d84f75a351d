"""API route modules."""

from .health import router as health_router
from .workload import router as workload_router

__all__ = ["health_router", "workload_router"]
