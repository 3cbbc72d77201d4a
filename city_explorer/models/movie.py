"""Movies matching a location's search text. Append-only."""
from sqlalchemy import Column, Date, Float, Integer, Text

from city_explorer.db.base import Base


class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=True)
    overview = Column(Text, nullable=True)
    average_votes = Column(Float, nullable=True)
    total_votes = Column(Integer, nullable=True)
    image_url = Column(Text, nullable=True)
    popularity = Column(Float, nullable=True)
    released_on = Column(Date, nullable=True)
    location_id = Column(Integer, nullable=False, index=True)
