import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from .config import LOG_LEVEL, RESEND_API_KEY
from .routes.beta import router as beta_router

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    if not RESEND_API_KEY:
        logger.warning("RESEND_API_KEY not set - welcome emails will fail to send")
    yield
    logger.info("Application shutting down...")


app = FastAPI(title="GoalHero Beta API", version="1.0.0", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


# Routes
app.include_router(beta_router)


@app.get("/")
def root():
    return {"message": "GoalHero Beta API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
