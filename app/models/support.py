from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel

class Support(SQLModel, table=True):
    sid: Optional[int] = Field(default=None, primary_key=True)

    # Ticket Content
    stype: str = Field(index=True)  # e.g. "notice", "faq", "inquiry"
    title: str
    content: Optional[str] = None

    # Metadata
    hits: int = Field(default=0)
    rdate: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
