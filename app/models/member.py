from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel

class Member(SQLModel, table=True):
    id: str = Field(primary_key=True)

    # Credentials (argon2 hash, never plain text)
    password: str

    # Basic Info
    name: str
    email: str = Field(index=True)
    phone: Optional[str] = None

    # Timestamps
    mdate: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
