from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.member import (
    MemberLogin,
    MemberSignup,
    MemberIdCheck,
    MemberEmailCheck,
    LoginResult,
    IdCheckResult,
    EmailCheckResult,
)
from app.services.member import MemberService

router = APIRouter()

def get_member_service(session: Session = Depends(get_session)) -> MemberService:
    return MemberService(session)

@router.post("/login", response_model=LoginResult)
def login(data: MemberLogin, service: MemberService = Depends(get_member_service)):
    return {"login": service.login(data.id, data.password)}

@router.post("/signup", response_model=int)
def signup(member_in: MemberSignup, service: MemberService = Depends(get_member_service)):
    return service.signup(
        member_in.id,
        member_in.password,
        name=member_in.name,
        email=member_in.email,
        phone=member_in.phone
    )

@router.post("/idcheck", response_model=IdCheckResult)
def id_check(data: MemberIdCheck, service: MemberService = Depends(get_member_service)):
    return {"result": service.id_check(data.id)}

@router.post("/check-email", response_model=EmailCheckResult)
def check_email(data: MemberEmailCheck, service: MemberService = Depends(get_member_service)):
    return {"isDuplicate": service.email_check(data.email)}
