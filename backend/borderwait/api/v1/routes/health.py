from fastapi import APIRouter

from borderwait.api.v1.schemas.ports import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}
