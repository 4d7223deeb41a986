from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from company_stocks.database.connection import get_db

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc),
        "service": "company-stocks",
    }


@router.get("/database")
async def database_health(db: AsyncSession = Depends(get_db)) -> dict[str, str]:
    """Checks that the database accepts queries."""
    status = {
        "database": "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    try:
        # The driver raises OSError when the store refuses connections.
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        status["error"] = f"Failed to query the database: {e}"
        raise HTTPException(status_code=503, detail=status)

    status["database"] = "healthy"
    return status
