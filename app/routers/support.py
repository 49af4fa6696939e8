from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.db.session import get_session
from app.models.support import Support
from app.services.support import SupportService

router = APIRouter()

def get_support_service(session: Session = Depends(get_session)) -> SupportService:
    return SupportService(session)

@router.post("/list", response_model=List[Support])
def get_support_list(service: SupportService = Depends(get_support_service)):
    """
    All support notices, newest first.
    """
    return service.get_support_list()
