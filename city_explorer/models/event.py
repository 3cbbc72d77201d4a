"""Events near a location. Append-only."""
from sqlalchemy import Column, Integer, String, Text

from city_explorer.db.base import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    link = Column(Text, nullable=True)
    name = Column(Text, nullable=True)
    event_date = Column(String(32), nullable=True)
    summary = Column(Text, nullable=True)
    location_id = Column(Integer, nullable=False, index=True)
