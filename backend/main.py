# backend/main.py
import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv()

from config import settings
from database import SessionLocal, init_db
from seed import seed_demo_data
from storage.provider import memory_store
from storage.sql import SqlStore
from utils.errors import PortalError

# Routers
from routes.auth import router as auth_router
from routes.courses import router as courses_router
from routes.notices import router as notices_router
from routes.progress import router as progress_router
from routes.assessments import router as assessments_router
from routes.certificates import router as certificates_router
from routes.logs import router as logs_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def bootstrap():
    """Create tables (SQL backend) and load the demo data when enabled."""
    if settings.STORAGE_BACKEND == "memory":
        if settings.SEED_DEMO_DATA:
            seed_demo_data(memory_store())
        return

    init_db()
    if settings.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_demo_data(SqlStore(db))
        finally:
            db.close()


bootstrap()

app = FastAPI(title="Safety Education Portal API", version="1.0.0")

origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
if settings.FRONTEND_URL and settings.FRONTEND_URL not in origins:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Typed service failures carry their own status code
@app.exception_handler(PortalError)
def handle_portal_error(request: Request, exc: PortalError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


# Malformed request bodies are a 400 like any other validation failure
@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


app.include_router(auth_router)
app.include_router(courses_router)
app.include_router(notices_router)
app.include_router(progress_router)
app.include_router(assessments_router)
app.include_router(certificates_router)
app.include_router(logs_router)


@app.get("/")
def read_root():
    return {"message": "Safety Education Portal API is running"}
