from hostel_allocation.db.base import Base
from hostel_allocation.db.session import SessionLocal, engine, get_db

__all__ = ["Base", "SessionLocal", "engine", "get_db"]
