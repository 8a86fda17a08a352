# backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from config import settings
from database import engine, init_db
from utils.errors import register_exception_handlers

# Routers
from routes.auth import router as auth_router
from routes.admin import router as admin_router
from routes.courses import router as courses_router
from routes.orders import router as orders_router
from routes.student import router as student_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Tables are created once at startup, the connection pool is released at shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready")
    yield
    engine.dispose()


app = FastAPI(title="Course Portal API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Router registration
app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(courses_router)
app.include_router(orders_router)
app.include_router(student_router)

@app.get("/")
def read_root():
    return {"message": "Course portal API is running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
