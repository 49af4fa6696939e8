from typing import Optional
from pydantic import BaseModel

class MemberLogin(BaseModel):
    id: str
    password: str

class MemberSignup(BaseModel):
    id: str
    password: str
    name: str
    email: str
    phone: Optional[str] = None

class MemberIdCheck(BaseModel):
    id: str

class LoginResult(BaseModel):
    login: bool

class IdCheckResult(BaseModel):
    result: bool

class MemberEmailCheck(BaseModel):
    email: str

class EmailCheckResult(BaseModel):
    isDuplicate: bool
