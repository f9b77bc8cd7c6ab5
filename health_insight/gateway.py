import logging
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from . import models
from .db import Base
from .engine import EvaluationResult
from .errors import ReadFailed, StorageUnavailable, WriteFailed
from .knowledge import KnowledgeBase
from .schemas import AssessmentRecord
from .summary import advice_summary, symptoms_csv, top_conditions_summary

logger = logging.getLogger(__name__)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


class AssessmentGateway:
    """Stores users and their assessment history.

    Every public call opens its own session. SQLAlchemy errors come back as
    WriteFailed/ReadFailed; calls made before a successful initialize() raise
    StorageUnavailable. There is no retry here.
    """

    def __init__(self, session_factory: sessionmaker, engine=None):
        self._session_factory = session_factory
        self._engine = engine if engine is not None else session_factory.kw.get("bind")
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    def initialize(self) -> None:
        try:
            Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as exc:
            self._connected = False
            logger.warning("Database initialisation failed: %s", exc)
            raise StorageUnavailable(f"Could not initialise storage: {exc}") from exc
        self._connected = True
        logger.info("Database ready")

    def _session(self) -> Session:
        if not self._connected:
            raise StorageUnavailable("Database is not connected")
        return self._session_factory()

    def find_user_id_by_name(self, name: str) -> Optional[int]:
        db = self._session()
        try:
            return db.execute(
                select(models.User.id).where(models.User.name == name).order_by(models.User.id).limit(1)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("User lookup failed for %r: %s", name, exc)
            raise ReadFailed(f"Could not look up user {name!r}") from exc
        finally:
            db.close()

    def ensure_user(self, name: str, age: int, sex: Optional[str]) -> int:
        try:
            existing = self.find_user_id_by_name(name)
        except ReadFailed as exc:
            raise WriteFailed(f"Could not create user {name!r}") from exc
        if existing is not None:
            return existing

        db = self._session()
        try:
            user = models.User(name=name, age=age, sex=sex)
            db.add(user)
            db.commit()
            logger.info("Created user %r (id=%s)", name, user.id)
            return user.id
        except IntegrityError:
            # another request created the same name first
            db.rollback()
            logger.info("User %r already created concurrently", name)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Could not create user %r: %s", name, exc)
            raise WriteFailed(f"Could not create user {name!r}") from exc
        finally:
            db.close()

        try:
            existing = self.find_user_id_by_name(name)
        except ReadFailed as exc:
            raise WriteFailed(f"Could not create user {name!r}") from exc
        if existing is None:
            raise WriteFailed(f"Could not create user {name!r}")
        return existing

    def save_assessment(
        self,
        user_id: int,
        symptoms: str,
        top_conditions: str,
        advice: str,
        urgent: bool,
        notes: Optional[str] = None,
    ) -> int:
        db = self._session()
        try:
            row = models.Assessment(
                user_id=user_id,
                symptoms=symptoms,
                top_conditions=top_conditions,
                advice=advice,
                urgent=bool(urgent),
                notes=_blank_to_none(notes),
            )
            db.add(row)
            db.commit()
            logger.info("Saved assessment %s for user %s (urgent=%s)", row.id, user_id, row.urgent)
            return row.id
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Could not save assessment for user %s: %s", user_id, exc)
            raise WriteFailed("Could not save assessment") from exc
        finally:
            db.close()

    def fetch_recent_assessments(self, user_id: int, limit: int = 10) -> List[AssessmentRecord]:
        db = self._session()
        try:
            rows = db.execute(
                select(models.Assessment)
                .where(models.Assessment.user_id == user_id)
                .order_by(models.Assessment.created_at.desc(), models.Assessment.id.desc())
                .limit(limit)
            ).scalars().all()
            return [AssessmentRecord.model_validate(r) for r in rows]
        except SQLAlchemyError as exc:
            logger.error("Could not load assessments for user %s: %s", user_id, exc)
            raise ReadFailed("Could not load assessments") from exc
        finally:
            db.close()

    def save_evaluation(
        self,
        name: str,
        age: int,
        sex: Optional[str],
        selected: Iterable[str],
        result: EvaluationResult,
        knowledge: KnowledgeBase,
        notes: Optional[str] = None,
    ) -> Tuple[int, int]:
        """Ensure the user exists and append the summarised result. Returns (user_id, assessment_id)."""
        user_id = self.ensure_user(name, age, sex)
        assessment_id = self.save_assessment(
            user_id,
            symptoms_csv(selected, knowledge),
            top_conditions_summary(result),
            advice_summary(result),
            result.urgent,
            notes.strip() if notes else notes,
        )
        return user_id, assessment_id
