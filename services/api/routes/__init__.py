from .summary import router as summary_router
from .portfolio import router as portfolio_router
from .health import router as health_router

__all__ = ["summary_router", "portfolio_router", "health_router"]
