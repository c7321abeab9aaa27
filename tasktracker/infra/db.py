"""
SQLAlchemy database models and configuration.

Architecture Decision: Why SQLAlchemy?
- Provides ORM for cleaner code and prevents SQL injection
- Easy to migrate to PostgreSQL or other databases if needed

Architecture Decision: Why a key-value table?
The stores persist full-collection snapshots, one blob per key. A single
table keeps the schema stable when the snapshot format evolves.
"""

from datetime import datetime

from sqlalchemy import create_engine, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, Session, sessionmaker


# Base class for all models
class Base(DeclarativeBase):
    pass


class KeyValueModel(Base):
    """SQLAlchemy model for one persisted snapshot"""
    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now, nullable=False
    )


class DatabaseEngine:
    """
    Manages database connection and session lifecycle.
    """

    def __init__(self, db_url: str):
        self.url = db_url
        self.engine = create_engine(db_url, echo=False)
        self.session_factory = sessionmaker(self.engine, class_=Session, expire_on_commit=False)

    def create_tables(self):
        """Create all tables in the database"""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session"""
        return self.session_factory()

    def dispose(self):
        """Close all pooled connections"""
        self.engine.dispose()


def init_db(db_url: str) -> DatabaseEngine:
    """Create an engine and make sure the schema exists"""
    engine = DatabaseEngine(db_url)
    engine.create_tables()
    return engine
