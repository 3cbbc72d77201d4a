"""Daily forecast summaries for a location. Append-only."""
from sqlalchemy import Column, Integer, String, Text

from city_explorer.db.base import Base


class Weather(Base):
    __tablename__ = "weathers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    forecast = Column(Text, nullable=True)
    time = Column(String(32), nullable=True)  # e.g. "Mon Oct 19 2026"
    location_id = Column(Integer, nullable=False, index=True)  # locations.id, not enforced
