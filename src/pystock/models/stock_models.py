import logging
from typing import List, Optional

from sqlalchemy import Column, Integer, Text, delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Field, select
from sqlmodel.ext.asyncio.session import AsyncSession

_logger = logging.getLogger(__name__)


class Stock(SQLModel, table=True):
    __tablename__ = "stocks"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column("stockid", Integer, primary_key=True, autoincrement=True),
    )
    name: str = Field(sa_type=Text, description="Stock name")
    price: int = Field(description="Stock price")
    company: str = Field(sa_type=Text, description="Issuing company")

    @classmethod
    async def insert(cls, session: AsyncSession, *, name: str, price: int, company: str) -> "Stock":
        """Insert a stock and return it with the database assigned id."""
        stock = cls(name=name, price=price, company=company)
        session.add(stock)
        try:
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            raise
        await session.refresh(stock)
        _logger.info("Inserted stock %s", stock.id)
        return stock

    @classmethod
    async def fetch(cls, session: AsyncSession, stock_id: int) -> Optional["Stock"]:
        """Fetch a stock by id, or None when no row matches."""
        result = await session.exec(select(cls).where(cls.id == stock_id))
        return result.one_or_none()

    @classmethod
    async def fetchAll(cls, session: AsyncSession) -> List["Stock"]:
        result = await session.exec(select(cls))
        return list(result.all())

    @classmethod
    async def updateById(
            cls, session: AsyncSession, stock_id: int, *, name: str, price: int, company: str
    ) -> int:
        """Overwrite name, price and company of one row. Returns the affected row count."""
        stmt = (
            update(cls)
            .where(cls.id == stock_id)
            .values(name=name, price=price, company=company)
            .execution_options(synchronize_session=False)
        )
        return await cls._executeWrite(session, stmt)

    @classmethod
    async def deleteById(cls, session: AsyncSession, stock_id: int) -> int:
        """Delete one row by id. Returns the affected row count."""
        stmt = delete(cls).where(cls.id == stock_id).execution_options(synchronize_session=False)
        return await cls._executeWrite(session, stmt)

    @classmethod
    async def _executeWrite(cls, session: AsyncSession, stmt) -> int:
        try:
            result = await session.exec(stmt)
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            raise
        _logger.info("Total rows/records affected %s", result.rowcount)
        return result.rowcount
