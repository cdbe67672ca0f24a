"""SQLAlchemy models for the fleet snapshot database."""

from sqlalchemy import Column, Float, Integer, String, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Boat(Base):
    """Boat model.

    Money columns hold decimal text so values survive a save/load cycle
    unchanged.
    """

    __tablename__ = "boats"

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    boat_type = Column(String, nullable=False)
    name = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    make = Column(String, nullable=False)
    feet = Column(Float, nullable=False)
    purchase_price = Column(String, nullable=False)
    expense = Column(String, nullable=False)


def create_sqlite_engine(database_path: str) -> Engine:
    """Create a SQLAlchemy engine for a SQLite file."""
    return create_engine(f"sqlite:///{database_path}", echo=False)
