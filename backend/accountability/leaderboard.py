"""League table aggregation.

Turns incident/complaint records into the ranked "worst offenders" views,
grouped either by presenter or by outlet, plus the platform-wide overview.
Everything here is a pure function of its inputs; data is fetched fresh by
the caller on every request and nothing is cached between calls.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, TypeVar, Union

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

GROUP_BY_PRESENTER = "presenter"
GROUP_BY_OUTLET = "outlet"
GROUP_BY_OPTIONS = (GROUP_BY_PRESENTER, GROUP_BY_OUTLET)

DEFAULT_LIMIT = 50

SENT_STATUS = "sent"


@dataclass(frozen=True)
class IncidentRecord:
	outlet_name: str
	presenter_name: Optional[str] = None
	# One element per complaint; None where the complainant gave no rating
	severity_ratings: Sequence[Optional[int]] = ()

	@property
	def complaint_count(self) -> int:
		return len(self.severity_ratings)


@dataclass(frozen=True)
class OutletRecord:
	outlet_id: str
	name: str
	category: Optional[str] = None
	incidents: Sequence[IncidentRecord] = ()


@dataclass(frozen=True)
class ComplaintRecord:
	status: str
	severity_rating: Optional[int] = None


@dataclass(frozen=True)
class PlatformSnapshot:
	incident_count: int = 0
	user_count: int = 0
	outlet_count: int = 0
	complaints: Sequence[ComplaintRecord] = ()


@dataclass
class PresenterEntry:
	presenter: str
	outlets: List[str]
	incident_count: int
	complaint_count: int
	avg_severity_rating: Optional[float]


@dataclass
class OutletEntry:
	outlet: str
	outlet_type: Optional[str]
	incident_count: int
	complaint_count: int
	avg_severity_rating: Optional[float]


@dataclass
class PlatformOverview:
	total_incidents: int
	total_complaints: int
	total_users: int
	total_outlets: int
	sent_complaints: int
	draft_complaints: int
	avg_severity_rating: Optional[float]


LeaderboardEntry = Union[PresenterEntry, OutletEntry]
E = TypeVar("E", PresenterEntry, OutletEntry)


class LeaderboardSource(Protocol):
	def presenter_incidents(self) -> Iterable[IncidentRecord]: ...

	def outlets_with_incidents(self) -> Iterable[OutletRecord]: ...

	def platform_snapshot(self) -> PlatformSnapshot: ...


def round_one_decimal(value: float) -> float:
	# Half-up, so 7.25 -> 7.3 rather than banker's rounding to 7.2
	return math.floor(value * 10 + 0.5) / 10


def average_rating(ratings: Iterable[Optional[int]]) -> Optional[float]:
	"""Mean of the present ratings to one decimal place, or None if there are none."""
	present = [r for r in ratings if r is not None]
	if not present:
		return None
	return round_one_decimal(sum(present) / len(present))


def _rank_key(entry: LeaderboardEntry) -> tuple:
	avg = entry.avg_severity_rating
	return (-entry.complaint_count, -(avg if avg is not None else 0))


def rank_entries(entries: Iterable[E], limit: Optional[int] = None) -> List[E]:
	"""Sort by complaint count then average severity (both descending) and cap the result.

	An absent average compares as zero but is left as None on the entry.
	The cap is applied only after the full ordering is known.
	"""
	ranked = sorted(entries, key=_rank_key)
	if limit is not None:
		ranked = ranked[:limit]
	return ranked


@dataclass
class _PresenterGroup:
	outlets: Dict[str, None] = field(default_factory=dict)
	incident_count: int = 0
	complaint_count: int = 0
	ratings: List[int] = field(default_factory=list)


def group_by_presenter(incidents: Iterable[IncidentRecord]) -> List[PresenterEntry]:
	groups: Dict[str, _PresenterGroup] = {}
	for incident in incidents:
		presenter = incident.presenter_name
		# Unnamed presenters and incidents nobody complained about are left out
		if not presenter or incident.complaint_count == 0:
			continue
		group = groups.setdefault(presenter, _PresenterGroup())
		group.outlets[incident.outlet_name] = None
		group.incident_count += 1
		group.complaint_count += incident.complaint_count
		group.ratings.extend(r for r in incident.severity_ratings if r is not None)
	logger.debug("Grouped incidents into %d presenters", len(groups))
	return [
		PresenterEntry(
			presenter=presenter,
			outlets=list(group.outlets),
			incident_count=group.incident_count,
			complaint_count=group.complaint_count,
			avg_severity_rating=average_rating(group.ratings),
		)
		for presenter, group in groups.items()
	]


def group_by_outlet(outlets: Iterable[OutletRecord]) -> List[OutletEntry]:
	entries: List[OutletEntry] = []
	for outlet in outlets:
		complaint_count = sum(inc.complaint_count for inc in outlet.incidents)
		if complaint_count == 0:
			continue
		ratings = [r for inc in outlet.incidents for r in inc.severity_ratings]
		entries.append(OutletEntry(
			outlet=outlet.name,
			outlet_type=outlet.category,
			# Every incident counts here, including ones with no complaints
			incident_count=len(outlet.incidents),
			complaint_count=complaint_count,
			avg_severity_rating=average_rating(ratings),
		))
	logger.debug("Built %d outlet entries", len(entries))
	return entries


def validate_group_by(group_by: str) -> str:
	if group_by not in GROUP_BY_OPTIONS:
		raise InvalidArgument('Invalid groupBy parameter. Use "presenter" or "outlet"')
	return group_by


def compute_leaderboard(group_by: str, source: LeaderboardSource, limit: int = DEFAULT_LIMIT) -> List[LeaderboardEntry]:
	"""Ranked league table for one grouping mode.

	Arguments are checked before the source is read, so a bad request never
	triggers a data fetch or yields a partial table.
	"""
	validate_group_by(group_by)
	if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
		raise InvalidArgument("limit must be a positive integer")
	if group_by == GROUP_BY_PRESENTER:
		entries: List[LeaderboardEntry] = group_by_presenter(source.presenter_incidents())
	else:
		entries = group_by_outlet(source.outlets_with_incidents())
	return rank_entries(entries, limit)


def summarize_platform(snapshot: PlatformSnapshot) -> PlatformOverview:
	total = len(snapshot.complaints)
	sent = sum(1 for c in snapshot.complaints if c.status == SENT_STATUS)
	return PlatformOverview(
		total_incidents=snapshot.incident_count,
		total_complaints=total,
		total_users=snapshot.user_count,
		total_outlets=snapshot.outlet_count,
		sent_complaints=sent,
		# Anything not yet sent, response_received included
		draft_complaints=total - sent,
		avg_severity_rating=average_rating(c.severity_rating for c in snapshot.complaints),
	)


def compute_platform_overview(source: LeaderboardSource) -> PlatformOverview:
	return summarize_platform(source.platform_snapshot())
