"""SQLAlchemy models for megastore database."""

from datetime import datetime, UTC
from sqlalchemy import Column, Integer, String, DateTime, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from megastore.domain.entities import EntityKind

Base = declarative_base()


class CatalogEntryMixin:
    """Columns shared by every catalog table."""

    id = Column(Integer, primary_key=True)
    # Not unique: a deleted record may share its name with an active one
    name = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)


class Category(CatalogEntryMixin, Base):
    """Product category model."""

    __tablename__ = "categories"


class Color(CatalogEntryMixin, Base):
    """Product color model."""

    __tablename__ = "colors"


class Branch(CatalogEntryMixin, Base):
    """Store branch model."""

    __tablename__ = "branches"


MODELS: dict[EntityKind, type[CatalogEntryMixin]] = {
    EntityKind.CATEGORY: Category,
    EntityKind.COLOR: Color,
    EntityKind.BRANCH: Branch,
}


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # The API may touch the session from a thread other than its creator
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
