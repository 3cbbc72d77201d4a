"""Root entity: one row per distinct search text."""
from sqlalchemy import Column, Float, Integer, Text

from city_explorer.db.base import Base


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    search_query = Column(Text, nullable=False, unique=True)
    formatted_query = Column(Text, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
