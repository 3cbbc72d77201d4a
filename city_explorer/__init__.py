"""City Explorer: location, weather, events and movies behind a database cache."""
__version__ = "0.1.0"
