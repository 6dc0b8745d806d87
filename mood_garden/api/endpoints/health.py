"""
Simple health check endpoint.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, text

from mood_garden.core.database import get_session
from mood_garden.core.logging_config import log_error
from mood_garden.core.time_utils import serialize_datetime, utc_now
from mood_garden.schemas.health import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        500: {"description": "Internal server error"},
    }
)
async def health_check(session: Annotated[Session, Depends(get_session)]):
    """
    Liveness check with database status.

    Reports "degraded" if the database is unreachable but the service is running.
    """
    try:
        db_status = "connected"
        try:
            session.exec(text("SELECT 1")).first()
        except Exception as e:
            db_status = f"disconnected: {str(e)}"

        return HealthResponse(
            status="ok" if db_status == "connected" else "degraded",
            message="Mood Garden API is running",
            timestamp=serialize_datetime(utc_now()),
            database=db_status,
        )
    except Exception as e:
        log_error(e)
        raise HTTPException(status_code=500, detail="Health check failed")
