from typing import List
from sqlmodel import Session, select

from app.models.support import Support

class SupportRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[Support]:
        return self.session.exec(select(Support).order_by(Support.rdate.desc(), Support.sid.desc())).all()
