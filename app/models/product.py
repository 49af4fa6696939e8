from typing import Optional
from sqlmodel import Field, SQLModel

class Product(SQLModel, table=True):
    pid: str = Field(primary_key=True)

    # Basic Info
    name: str = Field(index=True)
    image: Optional[str] = None

    # Pricing
    price: int
