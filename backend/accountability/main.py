import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .db import Base, engine, ensure_schema
from .logging_config import configure_logging
from .settings import settings
from .routers import health
from .routers import stats

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Media Accountability API")

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.allowed_origins(),
	allow_credentials=True,
	allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
	allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(stats.router)


@app.on_event("startup")
def startup_event():
	# Initialize DB schema
	Base.metadata.create_all(bind=engine)
	# Apply lightweight dev migrations
	ensure_schema()
	logger.info("Media Accountability API started; CORS origins: %s", settings.allowed_origins())
