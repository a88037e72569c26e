from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from ..db.session import get_session

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health(session: AsyncSession = Depends(get_session)):
    """Report whether a pooled connection can run a trivial query."""
    try:
        await session.exec(text("SELECT 1"))
    except SQLAlchemyError as e:
        _logger.warning("Health check failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "unavailable", "database": "unreachable"})
    return {"status": "ok", "database": "reachable"}
