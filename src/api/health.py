"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Return application health and loaded meaning plugins."""
    engine = getattr(request.app.state, "meaning_engine", None)
    if engine is None:
        return {"status": "starting", "plugins": "0"}
    return {"status": "ok", "plugins": str(len(engine.plugins))}
