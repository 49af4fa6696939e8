import logging
from typing import List
from sqlalchemy.engine import Row
from sqlmodel import Session

from app.repositories.cart import CartRepository
from app.schemas.cart import CartItemRead

logger = logging.getLogger(__name__)

class CartService:
    """Pass-through over CartRepository; keeps routers away from SQL."""

    def __init__(self, session: Session):
        self.repository = CartRepository(session)

    def update_qty(self, cid: int, type: str) -> int:
        logger.debug("update_qty cid=%s type=%s", cid, type)
        return self.repository.update_qty(cid, type)

    def check_qty(self, pid: str, size: str, id: str) -> Row:
        logger.debug("check_qty member=%s pid=%s size=%s", id, pid, size)
        return self.repository.check_qty(pid, size, id)

    def add(self, size: str, qty: int, pid: str, id: str) -> int:
        logger.debug("add member=%s pid=%s size=%s qty=%s", id, pid, size, qty)
        return self.repository.add(size, qty, pid, id)

    def get_cart_list(self, id: str) -> List[CartItemRead]:
        logger.debug("get_cart_list member=%s", id)
        return self.repository.find_by_user_id(id)

    def remove(self, cid: int) -> int:
        logger.debug("remove cid=%s", cid)
        return self.repository.remove(cid)

    def get_cart_count(self, id: str) -> int:
        logger.debug("get_cart_count member=%s", id)
        return self.repository.count_by_user_id(id)

    def add_or_increment(self, size: str, qty: int, pid: str, id: str) -> int:
        logger.debug("add_or_increment member=%s pid=%s size=%s qty=%s", id, pid, size, qty)
        return self.repository.add_or_increment(size, qty, pid, id)
