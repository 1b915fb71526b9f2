# ai_feed/routers/health.py

from fastapi import APIRouter, Depends

from ..deps import get_database

router = APIRouter()


# "/healthz" is the usual liveness-probe path for container orchestrators.
@router.get("/healthz")
async def healthz(database=Depends(get_database)):
    """
    Reports service liveness together with content repository connectivity.

    Always answers 200; the ``database`` block carries ``connected: false``
    and the error when the repository cannot be reached.
    """
    probe = await database.health_check()
    return {"status": "ok", "database": probe}
