from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel

class Cart(SQLModel, table=True):
    cid: Optional[int] = Field(default=None, primary_key=True)

    # References
    id: str = Field(index=True)  # owning member
    pid: str = Field(foreign_key="product.pid")

    # Line Details
    size: str
    qty: int = Field(default=1)

    # Timestamps
    cdate: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
