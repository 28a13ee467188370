from __future__ import annotations
import logging

from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
from .settings import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url or "sqlite:///./app.db"

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=_connect_args, echo=settings.sql_echo, future=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
Base = declarative_base()


def get_db():
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()


# Best-effort lightweight migrations for development (SQLite-friendly)
def ensure_schema(bind=None) -> None:
	bind = bind or engine
	try:
		inspector = inspect(bind)
		tables = set(inspector.get_table_names())
	except SQLAlchemyError:
		logger.warning("Could not inspect database schema; skipping migrations")
		return
	if "complaints" in tables:
		cols = {c["name"] for c in inspector.get_columns("complaints")}
		with bind.begin() as conn:
			if "severity_rating" not in cols:
				logger.info("Adding complaints.severity_rating column")
				conn.exec_driver_sql("ALTER TABLE complaints ADD COLUMN severity_rating INTEGER")
			if "sent_to" not in cols:
				logger.info("Adding complaints.sent_to column")
				conn.exec_driver_sql("ALTER TABLE complaints ADD COLUMN sent_to VARCHAR(256)")
