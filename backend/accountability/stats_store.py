from __future__ import annotations
import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from .errors import UpstreamDataError
from .leaderboard import ComplaintRecord, IncidentRecord, OutletRecord, PlatformSnapshot
from .models import Complaint, Incident, MediaOutlet, User

logger = logging.getLogger(__name__)


def _incident_record(incident: Incident, outlet_name: str) -> IncidentRecord:
	return IncidentRecord(
		outlet_name=outlet_name,
		presenter_name=incident.presenter_name,
		severity_ratings=tuple(c.severity_rating for c in incident.complaints),
	)


class SqlLeaderboardSource:
	"""Reads the league table inputs from the database, one query set per call."""

	def __init__(self, db: Session) -> None:
		self.db = db

	def presenter_incidents(self) -> List[IncidentRecord]:
		stmt = (
			select(Incident)
			.where(Incident.presenter_name.is_not(None), Incident.complaints.any())
			.options(selectinload(Incident.outlet), selectinload(Incident.complaints))
		)
		try:
			incidents = self.db.scalars(stmt).all()
		except SQLAlchemyError as err:
			raise UpstreamDataError("could not load incidents") from err
		return [_incident_record(inc, inc.outlet.name) for inc in incidents]

	def outlets_with_incidents(self) -> List[OutletRecord]:
		stmt = select(MediaOutlet).options(
			selectinload(MediaOutlet.incidents).selectinload(Incident.complaints)
		)
		try:
			outlets = self.db.scalars(stmt).all()
		except SQLAlchemyError as err:
			raise UpstreamDataError("could not load outlets") from err
		return [
			OutletRecord(
				outlet_id=outlet.id,
				name=outlet.name,
				category=outlet.type,
				incidents=tuple(_incident_record(inc, outlet.name) for inc in outlet.incidents),
			)
			for outlet in outlets
		]

	def platform_snapshot(self) -> PlatformSnapshot:
		try:
			incident_count = self.db.scalar(select(func.count()).select_from(Incident)) or 0
			user_count = self.db.scalar(select(func.count()).select_from(User)) or 0
			outlet_count = self.db.scalar(select(func.count()).select_from(MediaOutlet)) or 0
			rows = self.db.execute(select(Complaint.status, Complaint.severity_rating)).all()
		except SQLAlchemyError as err:
			raise UpstreamDataError("could not load platform totals") from err
		logger.debug("Snapshot: %d incidents, %d complaints", incident_count, len(rows))
		return PlatformSnapshot(
			incident_count=incident_count,
			user_count=user_count,
			outlet_count=outlet_count,
			complaints=tuple(ComplaintRecord(status=status, severity_rating=rating) for status, rating in rows),
		)
