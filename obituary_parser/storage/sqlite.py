"""SQLite storage for geocoding results.

Geocoding goes over the network and Nominatim rate-limits its clients, so
places already looked up are kept in a small SQLite database that survives
between runs.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from sqlalchemy import Column, Float, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from obituary_parser.resolvers.geocoding import cache_key
from obituary_parser.schemas import GeoPoint

Base = declarative_base()


class GeocodedPlace(Base):
    """A place name and the coordinates it resolved to."""

    __tablename__ = "geocoded_places"

    id = Column(Integer, primary_key=True)
    place_key = Column(String, nullable=False, unique=True)
    raw = Column(String, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(String, default=lambda: datetime.utcnow().isoformat())

    def __repr__(self) -> str:
        return f"<GeocodedPlace(id={self.id}, place_key='{self.place_key}')>"


class SQLiteGeocodeCache:
    """Geocode cache persisted in SQLite."""

    def __init__(self, db_path: Path | None = None):
        """Initialize the cache database.

        Args:
            db_path: Path to SQLite database file (default: ./geocode_cache.db)
        """
        self.db_path = db_path or Path("./geocode_cache.db")
        self.engine = create_engine(f"sqlite:///{self.db_path}")
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine)

    def get_session(self):
        """Get a new database session."""
        return self.Session()

    def get(self, place: str) -> GeoPoint | None:
        """Return the cached coordinates for a place, if any."""
        session = self.get_session()
        try:
            row = (
                session.query(GeocodedPlace)
                .filter(GeocodedPlace.place_key == cache_key(place))
                .first()
            )
            if row is None:
                return None
            return GeoPoint(raw=row.raw, latitude=row.latitude, longitude=row.longitude)
        finally:
            session.close()

    def put(self, place: str, point: GeoPoint) -> None:
        """Store the coordinates for a place unless already cached."""
        session = self.get_session()
        try:
            key = cache_key(place)
            if session.query(GeocodedPlace).filter(GeocodedPlace.place_key == key).first():
                return
            session.add(
                GeocodedPlace(
                    place_key=key,
                    raw=point.raw,
                    latitude=point.latitude,
                    longitude=point.longitude,
                )
            )
            session.commit()
        finally:
            session.close()

    def __len__(self) -> int:
        session = self.get_session()
        try:
            return session.query(GeocodedPlace).count()
        finally:
            session.close()

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache stats
        """
        return {
            "cached_places": len(self),
            "database_path": str(Path(self.db_path).absolute()),
        }
