from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .db import Base


OUTLET_TYPES = ("tv", "radio", "print", "online")
INFRACTION_TYPES = ("household_analogy", "debt_scare", "insolvency_myth", "other")

STATUS_DRAFT = "draft"
STATUS_SENT = "sent"
STATUS_RESPONSE_RECEIVED = "response_received"
COMPLAINT_STATUSES = (STATUS_DRAFT, STATUS_SENT, STATUS_RESPONSE_RECEIVED)


def _new_id() -> str:
	return str(uuid.uuid4())


class User(Base):
	__tablename__ = "users"
	id = Column(String(36), primary_key=True, default=_new_id)
	email = Column(String(256), unique=True, index=True, nullable=False)
	name = Column(String(128), nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

	complaints = relationship("Complaint", back_populates="user")


class MediaOutlet(Base):
	__tablename__ = "media_outlets"
	# Seeded outlets use readable slugs ("bbc-tv"); user-created ones get a uuid
	id = Column(String(64), primary_key=True, default=_new_id)
	name = Column(String(256), nullable=False)
	type = Column(String(16), nullable=True)  # one of OUTLET_TYPES
	complaint_email = Column(String(256), nullable=True)
	complaint_url = Column(String(512), nullable=True)
	notes = Column(Text, nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

	incidents = relationship("Incident", back_populates="outlet")


class Incident(Base):
	__tablename__ = "incidents"
	id = Column(String(36), primary_key=True, default=_new_id)
	outlet_id = Column(String(64), ForeignKey("media_outlets.id"), index=True, nullable=False)
	date = Column(DateTime, nullable=False)
	time = Column(String(16), nullable=True)
	program_name = Column(String(256), nullable=True)
	presenter_name = Column(String(256), index=True, nullable=True)
	description = Column(Text, nullable=False)
	media_url = Column(String(512), nullable=True)
	infraction_type = Column(String(32), nullable=True)  # one of INFRACTION_TYPES
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

	outlet = relationship("MediaOutlet", back_populates="incidents")
	complaints = relationship("Complaint", back_populates="incident")


class Complaint(Base):
	__tablename__ = "complaints"
	# One complaint per user per incident
	__table_args__ = (UniqueConstraint("incident_id", "user_id", name="uq_complaint_incident_user"),)
	id = Column(String(36), primary_key=True, default=_new_id)
	incident_id = Column(String(36), ForeignKey("incidents.id"), index=True, nullable=False)
	user_id = Column(String(36), ForeignKey("users.id"), index=True, nullable=False)
	letter_content = Column(Text, nullable=False, default="")
	status = Column(String(32), default=STATUS_DRAFT, nullable=False)
	severity_rating = Column(Integer, nullable=True)  # 1-10, absent when not rated
	sent_at = Column(DateTime, nullable=True)
	sent_to = Column(String(256), nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

	incident = relationship("Incident", back_populates="complaints")
	user = relationship("User", back_populates="complaints")
