from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def player_health() -> dict:
    return {"status": "ok"}
