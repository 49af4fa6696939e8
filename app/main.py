import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from app.core.config import settings
from app.db.session import create_db_and_tables

# Import models to ensure they are registered with SQLModel metadata
from app.models.product import Product
from app.models.cart import Cart
from app.models.member import Member
from app.models.support import Support

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", settings.PROJECT_NAME)
    create_db_and_tables()
    yield
    logger.info("Shutting down %s", settings.PROJECT_NAME)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
    description="Cart, member and support API for the storefront"
)

@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}. Visit /docs for Swagger UI."}

from app.routers import cart, member, support

app.include_router(cart.router, prefix="/cart", tags=["cart"])
app.include_router(member.router, prefix="/member", tags=["member"])
app.include_router(support.router, prefix="/support", tags=["support"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
