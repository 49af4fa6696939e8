import logging
from typing import Optional
from sqlmodel import Session
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException
from passlib.context import CryptContext

from app.models.member import Member
from app.repositories.member import MemberRepository

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

class MemberService:
    def __init__(self, session: Session):
        self.repository = MemberRepository(session)

    def get_password_hash(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    def login(self, id: str, password: str) -> bool:
        stored = self.repository.login(id)
        if stored is None:
            logger.warning("login failed: unknown member id=%s", id)
            return False
        if not self.verify_password(password, stored):
            logger.warning("login failed: wrong password for id=%s", id)
            return False
        return True

    def signup(self, id: str, password: str, name: str, email: str, phone: Optional[str] = None) -> int:
        if self.id_check(id):
            raise HTTPException(status_code=400, detail="ID already registered")

        member = Member(
            id=id,
            password=self.get_password_hash(password),
            name=name,
            email=email,
            phone=phone
        )
        try:
            return self.repository.save(member)
        except IntegrityError:
            # Lost a race with a concurrent signup for the same id
            raise HTTPException(status_code=400, detail="ID already registered")

    def id_check(self, id: str) -> bool:
        """True when the id is already taken."""
        return self.repository.count_by_id(id) == 1

    def email_check(self, email: str) -> bool:
        """True when another member already signed up with this email."""
        return self.repository.count_by_email(email) > 0
