"""
Health check endpoints for container orchestration.

/health/fast has no imports from our codebase so it answers even when the
rest of the app fails to load.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health/fast")
async def fast_health():
    """Minimal healthcheck - always returns 200."""
    return JSONResponse(content={"ok": True}, status_code=200)


@router.get("/health")
async def health_check(request: Request):
    """Full health check with service status."""
    from datetime import datetime, timezone
    try:
        from ..config import get_openai_api_key, get_config
        key, source = get_openai_api_key()
        config = get_config()
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "portfolio-api",
            "openai_key_loaded": key is not None,
            "openai_env_source": source,
            "openai_model": config.openai_model,
            "summary_client_ready": getattr(request.app.state, "summary_client", None) is not None,
        }
    except Exception as e:
        return {
            "status": "degraded",
            "error": str(e),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Ready once a summary client exists; 503 otherwise."""
    from datetime import datetime, timezone
    ready = getattr(request.app.state, "summary_client", None) is not None
    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "summary_client_ready": ready,
        },
    )
