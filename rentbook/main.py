import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from rentbook.core.config import settings
from rentbook.core.database import SessionLocal, init_db
from rentbook.core.errors import DuplicatePaymentError, InvalidReferenceError, StoreFault
from rentbook.core.logging import setup_logging
from rentbook.api.routes.houses import router as houses_router
from rentbook.api.routes.rooms import router as rooms_router
from rentbook.api.routes.tenants import router as tenants_router
from rentbook.api.routes.payments import router as payments_router
from rentbook.api.routes.dashboard import router as dashboard_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    init_db()
    logger.info("rentbook started (env=%s)", settings.ENV)
    yield


# 1) Create the app FIRST
app = FastAPI(title="Rentbook", lifespan=lifespan)

# 2) Add CORS Middleware BEFORE routes
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 3) Include routers AFTER app is created
app.include_router(houses_router)
app.include_router(rooms_router)
app.include_router(tenants_router)
app.include_router(payments_router)
app.include_router(dashboard_router)


# 4) Map core errors to HTTP
@app.exception_handler(StoreFault)
def store_fault_handler(request: Request, exc: StoreFault):
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


@app.exception_handler(InvalidReferenceError)
def invalid_reference_handler(request: Request, exc: InvalidReferenceError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(DuplicatePaymentError)
def duplicate_payment_handler(request: Request, exc: DuplicatePaymentError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


# 5) Health check endpoints
@app.get("/health")
def health():
    return {"ok": True, "service": "rentbook"}

@app.get("/db-health")
def db_health():
    db = SessionLocal()
    try:
        db.execute(text("select 1"))
        return {"ok": True, "db": "connected"}
    finally:
        db.close()
