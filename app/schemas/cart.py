from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field

# Request shapes. Each cart route reads only the fields it needs; extra
# fields from the legacy all-in-one payload are ignored.

class QtyUpdate(BaseModel):
    cid: int
    type: Literal["+", "-"]

class QtyCheck(BaseModel):
    pid: str
    size: str
    id: str

class CartItemCreate(BaseModel):
    size: str
    qty: int = Field(default=1, ge=0)
    pid: str
    id: str

class MemberRef(BaseModel):
    id: str

class CartRef(BaseModel):
    cid: int

# Response shapes

class QtyCheckResult(BaseModel):
    """Full cart-line key set; only cid and checkQty are filled by the lookup."""
    cid: int
    checkQty: int
    size: Optional[str] = None
    qty: Optional[int] = None
    pid: Optional[str] = None
    id: Optional[str] = None
    type: Optional[str] = None
    cdate: Optional[datetime] = None
    image: Optional[str] = None
    name: Optional[str] = None
    price: Optional[int] = None

class CartItemRead(BaseModel):
    cid: int
    size: str
    qty: int
    pid: str
    id: str
    cdate: datetime

    # Joined from product
    image: Optional[str] = None
    name: str
    price: int
