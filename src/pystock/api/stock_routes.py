from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models.stock_models import Stock
from ..schemas.stock_schemas import INT32_MAX, INT32_MIN, StockCreate, StockMessage, StockRead, StockUpdate
from ..db.session import get_session

router = APIRouter(prefix="/stock", tags=["Stocks"])

# Ids outside the SERIAL range are rejected before reaching the database
StockId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


@router.post("", response_model=StockMessage, status_code=status.HTTP_201_CREATED)
async def create_stock(stock_in: StockCreate, session: AsyncSession = Depends(get_session)):
    # Any id in the body is dropped by StockCreate
    stock = await Stock.insert(session, **stock_in.model_dump())
    return StockMessage(id=stock.id, message="stock created successfully")


@router.get("", response_model=list[StockRead])
async def list_stocks(session: AsyncSession = Depends(get_session)):
    return await Stock.fetchAll(session)


@router.get("/{stock_id}", response_model=StockRead)
async def get_stock(stock_id: StockId, session: AsyncSession = Depends(get_session)):
    stock = await Stock.fetch(session, stock_id)
    if not stock:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Stock not found")
    return stock


@router.put("/{stock_id}", response_model=StockMessage)
async def update_stock(
    stock_id: StockId,
    stock_update: StockUpdate,
    session: AsyncSession = Depends(get_session)
):
    updated_rows = await Stock.updateById(session, stock_id, **stock_update.model_dump())
    return StockMessage(
        id=stock_id,
        message=f"Stock updated successfully. Total rows/records affected {updated_rows}",
    )


@router.delete("/{stock_id}", response_model=StockMessage)
async def delete_stock(stock_id: StockId, session: AsyncSession = Depends(get_session)):
    deleted_rows = await Stock.deleteById(session, stock_id)
    return StockMessage(
        id=stock_id,
        message=f"Stock deleted successfully. Total rows/records affected {deleted_rows}",
    )
