import logging
from typing import Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.member import Member

logger = logging.getLogger(__name__)

class MemberRepository:
    def __init__(self, session: Session):
        self.session = session

    def login(self, id: str) -> Optional[str]:
        """Stored password hash for a member id, or None."""
        return self.session.exec(select(Member.password).where(Member.id == id)).first()

    def save(self, member: Member) -> int:
        self.session.add(member)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        logger.info("member saved id=%s", member.id)
        return 1

    def count_by_id(self, id: str) -> int:
        return self.session.exec(select(func.count()).select_from(Member).where(Member.id == id)).one()

    def count_by_email(self, email: str) -> int:
        return self.session.exec(select(func.count()).select_from(Member).where(Member.email == email)).one()
