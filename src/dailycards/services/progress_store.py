"""Whole-database storage backends for learner progress."""
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from copy import deepcopy
from pathlib import Path
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dailycards.errors import StorageError
from dailycards.models.base import init_db, make_engine, make_session_factory
from dailycards.models.models import CardStatus, Profile, ProgressDatabase
from dailycards.models.records import BucketCard, DateBucket, ProfileRecord

logger = logging.getLogger(__name__)


class ProgressStore(ABC):
    """Loads and replaces the complete progress database."""

    @abstractmethod
    def load(self) -> ProgressDatabase:
        """Return the persisted database."""

    @abstractmethod
    def save(self, db: ProgressDatabase) -> None:
        """Replace the persisted database with ``db``."""


class InMemoryProgressStore(ProgressStore):
    """Process-local store, mainly for tests."""

    def __init__(self, db: Optional[ProgressDatabase] = None):
        self._db = deepcopy(db) if db is not None else ProgressDatabase()
        self.save_count = 0

    def load(self) -> ProgressDatabase:
        return deepcopy(self._db)

    def save(self, db: ProgressDatabase) -> None:
        self._db = deepcopy(db)
        self.save_count += 1


class JsonProgressStore(ProgressStore):
    """Progress database kept in a single JSON file.

    A missing file reads as an empty database. Saves go through a temporary
    file in the same directory and an atomic rename.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> ProgressDatabase:
        if not self.path.exists():
            logger.info("Progress file %s not found, starting empty", self.path)
            return ProgressDatabase()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Progress file unreadable ({e})", str(self.path)) from e

        if not isinstance(raw, dict):
            raise StorageError("Progress file must hold a JSON object", str(self.path))
        try:
            return ProgressDatabase.from_data(raw)
        except (AttributeError, TypeError) as e:
            raise StorageError(f"Malformed progress file ({e})", str(self.path)) from e

    def save(self, db: ProgressDatabase) -> None:
        payload = json.dumps(db.to_data(), ensure_ascii=False, indent=2)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write progress file ({e})", str(self.path)) from e
        logger.debug("Saved %d profiles to %s", len(db.profiles), self.path)


class SqlProgressStore(ProgressStore):
    """Progress database kept in SQL tables via SQLAlchemy."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = make_engine(url, echo=echo)
        self.session_factory = make_session_factory(self.engine)
        init_db(self.engine)

    def load(self) -> ProgressDatabase:
        db = ProgressDatabase()
        try:
            with self.session_factory() as session:
                records = (
                    session.query(ProfileRecord)
                    .order_by(ProfileRecord.position)
                    .all()
                )
                for record in records:
                    db.profiles[record.id] = self._profile_from_record(record)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not load progress ({e})", self.url) from e
        return db

    def save(self, db: ProgressDatabase) -> None:
        try:
            with self.session_factory() as session:
                with session.begin():
                    self._clear(session)
                    for index, (profile_id, profile) in enumerate(db.profiles.items()):
                        session.add(self._record_from_profile(profile_id, profile, index))
        except SQLAlchemyError as e:
            raise StorageError(f"Could not save progress ({e})", self.url) from e
        logger.debug("Saved %d profiles to %s", len(db.profiles), self.url)

    def _clear(self, session: Session) -> None:
        session.query(BucketCard).delete()
        session.query(DateBucket).delete()
        session.query(ProfileRecord).delete()

    def _profile_from_record(self, record: ProfileRecord) -> Profile:
        profile = Profile()
        for bucket in record.buckets:
            card_ids = [card.card_id for card in bucket.cards]
            if bucket.status == CardStatus.LEARNED.value:
                profile.learned_by_date[bucket.date] = card_ids
            elif bucket.status == CardStatus.DIFFICULT.value:
                profile.difficult_by_date[bucket.date] = card_ids
            else:
                logger.warning("Skipping bucket %s with unknown status %r", bucket.id, bucket.status)
        return profile

    def _record_from_profile(self, profile_id: str, profile: Profile, index: int) -> ProfileRecord:
        record = ProfileRecord(id=profile_id, position=index)
        position = 0
        for status, by_date in (
            (CardStatus.LEARNED, profile.learned_by_date),
            (CardStatus.DIFFICULT, profile.difficult_by_date),
        ):
            for date, card_ids in by_date.items():
                bucket = DateBucket(date=date, status=status.value, position=position)
                bucket.cards = [
                    BucketCard(card_id=card_id, position=i)
                    for i, card_id in enumerate(card_ids)
                ]
                record.buckets.append(bucket)
                position += 1
        return record
