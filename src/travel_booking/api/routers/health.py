from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health_check(request: Request) -> dict[str, str]:
    """Report liveness together with the running application version."""
    return {"status": "ok", "version": request.app.version}
