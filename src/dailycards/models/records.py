"""Database tables for the SQL progress backend."""
from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from dailycards.models.base import Base, TimestampMixin


class ProfileRecord(Base, TimestampMixin):
    """Learner profile."""

    __tablename__ = "profiles"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    buckets = relationship(
        "DateBucket",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="DateBucket.position",
    )


class DateBucket(Base, TimestampMixin):
    """Card ids of one status for one profile and date."""

    __tablename__ = "date_buckets"
    __table_args__ = (UniqueConstraint("profile_id", "date", "status"),)

    id = Column(Integer, primary_key=True)
    profile_id = Column(String, ForeignKey("profiles.id"), nullable=False, index=True)
    date = Column(String, nullable=False)  # ISO YYYY-MM-DD
    status = Column(String, nullable=False)  # learned, difficult
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    profile = relationship("ProfileRecord", back_populates="buckets")
    cards = relationship(
        "BucketCard",
        back_populates="bucket",
        cascade="all, delete-orphan",
        order_by="BucketCard.position",
    )


class BucketCard(Base):
    """Card id stored in a date bucket."""

    __tablename__ = "bucket_cards"

    id = Column(Integer, primary_key=True)
    bucket_id = Column(Integer, ForeignKey("date_buckets.id"), nullable=False, index=True)
    card_id = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    bucket = relationship("DateBucket", back_populates="cards")
