from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from .core import config
from .core.database import engine, SessionLocal
from .core.seed import seed_demo_data
from .models import Base
from .auth.routes import router as auth_router
from .user.routes import router as user_router
from .seller.routes import router as seller_router
from .product.routes import router as product_router
from .cart.routes import router as cart_router
from .order.routes import router as order_router
from .favorites.routes import router as favorites_router
from .message.routes import router as message_router
from .post.routes import router as post_router
from .admin.routes import router as admin_router
from .files.routes import router as files_router
import logging

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_demo_data(db)
        finally:
            db.close()
    yield


app = FastAPI(title="Glyzier Marketplace API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create tables when starting up
try:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")
except Exception as e:
    logger.error(f"Error creating database tables: {str(e)}")
    raise


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


@app.get("/health")
def health_check():
    return {"status": "healthy"}


app.include_router(auth_router, prefix=config.API_PREFIX)
app.include_router(user_router, prefix=config.API_PREFIX)
app.include_router(seller_router, prefix=config.API_PREFIX)
app.include_router(product_router, prefix=config.API_PREFIX)
app.include_router(cart_router, prefix=config.API_PREFIX)
app.include_router(order_router, prefix=config.API_PREFIX)
app.include_router(favorites_router, prefix=config.API_PREFIX)
app.include_router(message_router, prefix=config.API_PREFIX)
app.include_router(post_router, prefix=config.API_PREFIX)
app.include_router(admin_router, prefix=config.API_PREFIX)
app.include_router(files_router, prefix=config.API_PREFIX)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("glyzier.main:app", host="0.0.0.0", port=8000, reload=config.DEBUG, log_level="info")
