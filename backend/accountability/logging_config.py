from __future__ import annotations
import logging

from .settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
	level_name = (level or settings.log_level or "INFO").upper()
	logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
	# SQL echo goes through sqlalchemy.engine; keep it quiet unless asked for
	if not settings.sql_echo:
		logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
