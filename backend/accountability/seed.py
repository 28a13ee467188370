from __future__ import annotations
import logging

from sqlalchemy.orm import Session

from .models import MediaOutlet

logger = logging.getLogger(__name__)

BBC_NOTES = "BBC complaints process - response within 10 working days"

# UK outlets available on a fresh install, keyed by stable slug
DEFAULT_OUTLETS = [
	{"id": "bbc-tv", "name": "BBC Television", "type": "tv", "complaint_email": "complaints@bbc.co.uk",
	 "complaint_url": "https://www.bbc.co.uk/contact/complaints", "notes": BBC_NOTES},
	{"id": "bbc-radio", "name": "BBC Radio", "type": "radio", "complaint_email": "complaints@bbc.co.uk",
	 "complaint_url": "https://www.bbc.co.uk/contact/complaints", "notes": BBC_NOTES},
	{"id": "itv", "name": "ITV", "type": "tv", "complaint_email": "viewerservices@itv.com",
	 "complaint_url": "https://www.itv.com/contact", "notes": "ITV viewer services"},
	{"id": "channel4", "name": "Channel 4", "type": "tv", "complaint_email": "viewerenquiries@channel4.co.uk",
	 "complaint_url": "https://www.channel4.com/4viewers/contact-us", "notes": "Channel 4 viewer enquiries"},
	{"id": "sky-news", "name": "Sky News", "type": "tv", "complaint_email": "news@sky.com",
	 "complaint_url": "https://www.sky.com/help/articles/sky-news-complaints", "notes": "Sky News editorial complaints"},
	{"id": "guardian", "name": "The Guardian", "type": "print", "complaint_email": "corrections@theguardian.com",
	 "complaint_url": "https://www.theguardian.com/info/2014/sep/12/corrections-and-clarifications",
	 "notes": "Guardian corrections and clarifications"},
	{"id": "telegraph", "name": "The Telegraph", "type": "print", "complaint_email": "letters@telegraph.co.uk",
	 "complaint_url": "https://www.telegraph.co.uk/contact-us/editorial/", "notes": "Telegraph editorial contact"},
	{"id": "times", "name": "The Times", "type": "print", "complaint_email": "feedback@thetimes.co.uk",
	 "complaint_url": "https://www.thetimes.co.uk/static/contact-us/", "notes": "Times editorial feedback"},
	{"id": "ft", "name": "Financial Times", "type": "print", "complaint_email": "letters.editor@ft.com",
	 "complaint_url": "https://help.ft.com/help/contact-us/", "notes": "FT letters to the editor"},
	{"id": "lbc", "name": "LBC Radio", "type": "radio", "complaint_email": "feedback@lbc.co.uk",
	 "complaint_url": "https://www.lbc.co.uk/contact/", "notes": "LBC listener feedback"},
]


def seed_outlets(db: Session) -> int:
	"""Insert any default outlet that is missing. Existing rows are left untouched."""
	created = 0
	for data in DEFAULT_OUTLETS:
		if db.get(MediaOutlet, data["id"]) is not None:
			continue
		db.add(MediaOutlet(**data))
		created += 1
	db.commit()
	logger.info("Seeded %d of %d default outlets", created, len(DEFAULT_OUTLETS))
	return created


if __name__ == "__main__":
	from .db import Base, SessionLocal, engine, ensure_schema
	from .logging_config import configure_logging

	configure_logging()
	Base.metadata.create_all(bind=engine)
	ensure_schema()
	session = SessionLocal()
	try:
		seed_outlets(session)
	finally:
		session.close()
