from app.schemas.cart import (
    QtyUpdate,
    QtyCheck,
    CartItemCreate,
    MemberRef,
    CartRef,
    QtyCheckResult,
    CartItemRead,
)
from app.schemas.member import (
    MemberLogin,
    MemberSignup,
    MemberIdCheck,
    MemberEmailCheck,
    LoginResult,
    IdCheckResult,
    EmailCheckResult,
)

__all__ = [
    "QtyUpdate",
    "QtyCheck",
    "CartItemCreate",
    "MemberRef",
    "CartRef",
    "QtyCheckResult",
    "CartItemRead",
    "MemberLogin",
    "MemberSignup",
    "MemberIdCheck",
    "LoginResult",
    "IdCheckResult",
    "MemberEmailCheck",
    "EmailCheckResult",
]
