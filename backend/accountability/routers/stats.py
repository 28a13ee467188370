from __future__ import annotations
import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import InvalidArgument
from ..leaderboard import (
	GROUP_BY_PRESENTER,
	OutletEntry,
	PresenterEntry,
	compute_leaderboard,
	compute_platform_overview,
	validate_group_by,
)
from ..settings import settings
from ..stats_store import SqlLeaderboardSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stats", tags=["stats"])


class _CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PresenterRow(_CamelModel):
	presenter: str
	outlets: List[str]
	incident_count: int
	complaint_count: int
	avg_severity_rating: Optional[float] = None


class OutletRow(_CamelModel):
	outlet: str
	outlet_type: Optional[str] = None
	incident_count: int
	complaint_count: int
	avg_severity_rating: Optional[float] = None


class LeagueTableResponse(_CamelModel):
	group_by: str
	leaderboard: List[Union[PresenterRow, OutletRow]]


class OverviewResponse(_CamelModel):
	total_incidents: int
	total_complaints: int
	total_users: int
	total_outlets: int
	sent_complaints: int
	draft_complaints: int
	avg_severity_rating: Optional[float] = None


def _to_row(entry: Union[PresenterEntry, OutletEntry]) -> Union[PresenterRow, OutletRow]:
	if isinstance(entry, PresenterEntry):
		return PresenterRow(
			presenter=entry.presenter,
			outlets=entry.outlets,
			incident_count=entry.incident_count,
			complaint_count=entry.complaint_count,
			avg_severity_rating=entry.avg_severity_rating,
		)
	return OutletRow(
		outlet=entry.outlet,
		outlet_type=entry.outlet_type,
		incident_count=entry.incident_count,
		complaint_count=entry.complaint_count,
		avg_severity_rating=entry.avg_severity_rating,
	)


@router.get("/league-table", response_model=LeagueTableResponse)
def league_table(
	group_by: str = Query(GROUP_BY_PRESENTER, alias="groupBy"),
	limit: Optional[int] = Query(None, ge=1),
	db: Session = Depends(get_db),
):
	try:
		validate_group_by(group_by)
	except InvalidArgument as e:
		raise HTTPException(status_code=400, detail=str(e))
	row_limit = limit if limit is not None else settings.league_table_default_limit
	try:
		entries = compute_leaderboard(group_by, SqlLeaderboardSource(db), limit=row_limit)
	except Exception:
		logger.exception("Get league table error (groupBy=%s)", group_by)
		raise HTTPException(status_code=500, detail="Error fetching league table")
	return LeagueTableResponse(group_by=group_by, leaderboard=[_to_row(e) for e in entries])


@router.get("/overview", response_model=OverviewResponse)
def overview(db: Session = Depends(get_db)):
	try:
		stats = compute_platform_overview(SqlLeaderboardSource(db))
	except Exception:
		logger.exception("Get overview stats error")
		raise HTTPException(status_code=500, detail="Error fetching overview statistics")
	return OverviewResponse(
		total_incidents=stats.total_incidents,
		total_complaints=stats.total_complaints,
		total_users=stats.total_users,
		total_outlets=stats.total_outlets,
		sent_complaints=stats.sent_complaints,
		draft_complaints=stats.draft_complaints,
		avg_severity_rating=stats.avg_severity_rating,
	)
