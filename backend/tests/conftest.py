from __future__ import annotations
import uuid
from datetime import datetime
from typing import Iterable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from accountability.db import Base, get_db
from accountability.main import app
from accountability.models import Complaint, Incident, MediaOutlet, User


@pytest.fixture
def engine():
	eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool, future=True)
	Base.metadata.create_all(bind=eng)
	try:
		yield eng
	finally:
		eng.dispose()


@pytest.fixture
def db(engine):
	Session = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
	session = Session()
	try:
		yield session
	finally:
		session.close()


@pytest.fixture
def client(db):
	def _override_get_db():
		yield db

	app.dependency_overrides[get_db] = _override_get_db
	try:
		yield TestClient(app)
	finally:
		app.dependency_overrides.clear()


class Factory:
	"""Small helper for building outlets, incidents and complaints in the test database."""

	def __init__(self, db):
		self.db = db

	def user(self) -> User:
		row = User(email=f"{uuid.uuid4().hex[:12]}@example.org")
		self.db.add(row)
		self.db.flush()
		return row

	def outlet(self, name: str, type: str = "tv") -> MediaOutlet:
		row = MediaOutlet(name=name, type=type)
		self.db.add(row)
		self.db.flush()
		return row

	def incident(
		self,
		outlet: MediaOutlet,
		presenter: Optional[str] = None,
		ratings: Iterable[Optional[int]] = (),
		statuses: Optional[Iterable[str]] = None,
	) -> Incident:
		row = Incident(outlet_id=outlet.id, presenter_name=presenter, date=datetime(2024, 3, 1), description="Said the country had maxed out its credit card")
		self.db.add(row)
		self.db.flush()
		ratings = list(ratings)
		statuses = list(statuses) if statuses is not None else ["draft"] * len(ratings)
		for rating, status in zip(ratings, statuses):
			self.db.add(Complaint(incident_id=row.id, user_id=self.user().id, letter_content="Dear editor", status=status, severity_rating=rating))
		self.db.commit()
		return row


@pytest.fixture
def factory(db):
	return Factory(db)
