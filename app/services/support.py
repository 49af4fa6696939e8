from typing import List
from sqlmodel import Session

from app.models.support import Support
from app.repositories.support import SupportRepository

class SupportService:
    def __init__(self, session: Session):
        self.repository = SupportRepository(session)

    def get_support_list(self) -> List[Support]:
        return self.repository.find_all()
