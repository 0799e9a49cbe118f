from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.articles.router import router as articles_router
from src.auth.router import router as auth_router
from src.categories.router import router as categories_router
from src.config import get_settings
from src.database import init_db
from src.languages.router import router as languages_router
from src.logging_config import get_logger, setup_logging
from src.public.router import router as public_router
from src.redis.client import redis_client

settings = get_settings()

# Initialize logging
setup_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database and Redis on application startup."""
    await init_db()

    # Admin sessions live in Redis
    await redis_client.connect()

    yield

    # Cleanup on shutdown
    await redis_client.disconnect()


app = FastAPI(
    title="Articles CMS API",
    description="API for managing multilingual articles, categories and languages",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(languages_router)
app.include_router(categories_router)
app.include_router(articles_router)
app.include_router(public_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
