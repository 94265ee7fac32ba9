# gecs_events/models/gecs_event.py
"""
GECSEVENTS table, one row per batch job event.
Column order matters: the dump reads SELECT * positionally.
"""

from sqlalchemy import Column, Integer, SmallInteger, String, DateTime
from gecs_events.database import Base


class GecsEvent(Base):
    __tablename__ = "GECSEVENTS"

    eventnumber = Column(Integer, primary_key=True, autoincrement=False)
    event_type = Column("type", SmallInteger)      # tinyint on MSSQL
    server = Column(String(64))
    batch = Column(String(50))
    jobnum = Column(String(50))
    submitted = Column(DateTime)
    began = Column(DateTime, primary_key=True)
    ended = Column(DateTime)
    message = Column(String(255))
    status = Column(SmallInteger)
    priority = Column(SmallInteger)
    fixedby = Column(String(48))
    fixcomment = Column(String(255))
    color = Column(SmallInteger)
    bkcolor = Column(SmallInteger)
    beingworkedon = Column(SmallInteger)
    dateclosed = Column(DateTime)
    added = Column(DateTime)

    def __repr__(self):
        return f"<GecsEvent {self.eventnumber} began={self.began} server={self.server}>"
