from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import NoResultFound
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.cart import (
    QtyUpdate,
    QtyCheck,
    CartItemCreate,
    MemberRef,
    CartRef,
    QtyCheckResult,
    CartItemRead,
)
from app.services.cart import CartService

router = APIRouter()

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

@router.post("/updateQty", response_model=int)
def update_qty(item: QtyUpdate, service: CartService = Depends(get_cart_service)):
    """Step a line's quantity by one"""
    return service.update_qty(item.cid, item.type)

@router.post("/checkQty", response_model=QtyCheckResult)
def check_qty(item: QtyCheck, service: CartService = Depends(get_cart_service)):
    """Find the member's cart line that best matches pid/size"""
    try:
        row = service.check_qty(item.pid, item.size, item.id)
    except NoResultFound:
        raise HTTPException(status_code=404, detail="No result")
    return QtyCheckResult(cid=row.cid, checkQty=row.checkQty)

@router.post("/add", response_model=int)
def add(item: CartItemCreate, service: CartService = Depends(get_cart_service)):
    """Insert a new cart line"""
    return service.add(item.size, item.qty, item.pid, item.id)

@router.post("/list", response_model=List[CartItemRead])
def get_cart_list(member: MemberRef, service: CartService = Depends(get_cart_service)):
    """Member's cart lines, newest first"""
    return service.get_cart_list(member.id)

@router.post("/remove", response_model=int)
def remove(item: CartRef, service: CartService = Depends(get_cart_service)):
    """Delete a cart line; 0 when it does not exist"""
    return service.remove(item.cid)

@router.post("/count", response_model=int)
def get_cart_count(member: MemberRef, service: CartService = Depends(get_cart_service)):
    """Total quantity across the member's cart"""
    return service.get_cart_count(member.id)

@router.post("/merge", response_model=int)
def merge(item: CartItemCreate, service: CartService = Depends(get_cart_service)):
    """Add to an existing pid/size line or insert one, atomically"""
    return service.add_or_increment(item.size, item.qty, item.pid, item.id)
