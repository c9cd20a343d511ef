from fastapi import APIRouter

from mall.core.utils import utc_now_iso

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok", "time": utc_now_iso()}
