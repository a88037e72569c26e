
from pydantic import BaseModel, Field

# Range of the INT / SERIAL columns
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


class StockBase(BaseModel):
    name: str
    price: int = Field(ge=INT32_MIN, le=INT32_MAX)
    company: str


class StockCreate(StockBase):
    pass


class StockUpdate(StockBase):
    pass


class StockRead(StockBase):
    id: int


class StockMessage(BaseModel):
    id: int
    message: str
