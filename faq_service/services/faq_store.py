"""
FAQ storage handle
Owns the SQLite engine and exposes the statements used by the API routes
"""
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from faq_service.database import Base, create_db_engine, create_session_factory
from faq_service.exceptions import StorageError
from faq_service.models import FAQ

logger = logging.getLogger(__name__)


class FAQStore:
    """Storage handle for the ``faq`` table"""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str) -> "FAQStore":
        return cls(create_db_engine(database_url))

    @contextmanager
    def _session(self, error_label: str) -> Iterator[Session]:
        """Yield a session; engine failures are rolled back and raised as StorageError"""
        db = self.session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"{error_label}: {e}")
            raise StorageError(error_label, str(getattr(e, "orig", None) or e)) from e
        finally:
            db.close()

    def ensure_schema(self) -> None:
        """Create the faq table if it does not exist. Existing rows are kept."""
        try:
            Base.metadata.create_all(bind=self.engine, tables=[FAQ.__table__])
        except SQLAlchemyError as e:
            logger.error(f"CREATE TABLE error: {e}")
            raise StorageError("Schema setup failed", str(getattr(e, "orig", None) or e)) from e
        logger.info("FAQ table ready")

    def list_all(self) -> List[FAQ]:
        """All entries, highest id first"""
        with self._session("Database error") as db:
            return db.query(FAQ).order_by(FAQ.id.desc()).all()

    def get_by_id(self, faq_id: int) -> Optional[FAQ]:
        """Return the entry or None when no row has this id"""
        with self._session("Database error") as db:
            return db.query(FAQ).filter(FAQ.id == faq_id).first()

    def insert(
        self,
        question: str,
        answer: str,
        category: str,
        created_at: str,
        updated_at: str,
    ) -> int:
        """
        Insert a new entry.

        Returns:
            id assigned by the database
        """
        with self._session("Insert failed") as db:
            faq = FAQ(
                question=question,
                answer=answer,
                category=category,
                created_at=created_at,
                updated_at=updated_at,
            )
            db.add(faq)
            db.flush()
            # id is read before commit; nothing after the commit may touch the database
            faq_id = faq.id
            db.commit()
            return faq_id

    def update(
        self,
        faq_id: int,
        question: str,
        answer: str,
        category: str,
        updated_at: str,
    ) -> int:
        """
        Overwrite question, answer, category and updated_at of one entry.

        Returns:
            number of rows affected (0 or 1)
        """
        with self._session("Update failed") as db:
            changes = (
                db.query(FAQ)
                .filter(FAQ.id == faq_id)
                .update(
                    {
                        FAQ.question: question,
                        FAQ.answer: answer,
                        FAQ.category: category,
                        FAQ.updated_at: updated_at,
                    },
                    synchronize_session=False,
                )
            )
            db.commit()
            return changes

    def delete(self, faq_id: int) -> int:
        """Delete one entry, returning the number of rows removed (0 or 1)"""
        with self._session("Delete failed") as db:
            changes = (
                db.query(FAQ)
                .filter(FAQ.id == faq_id)
                .delete(synchronize_session=False)
            )
            db.commit()
            return changes

    def table_info(self) -> List[dict]:
        """Column metadata of the faq table (PRAGMA table_info)"""
        with self._session("Database error") as db:
            rows = db.execute(text("PRAGMA table_info(faq)")).mappings().all()
            return [dict(row) for row in rows]

    def table_names(self) -> List[dict]:
        with self._session("Database error") as db:
            rows = db.execute(
                text("SELECT name FROM sqlite_master WHERE type = 'table'")
            ).mappings().all()
            return [dict(row) for row in rows]

    def dispose(self) -> None:
        """Release pooled connections"""
        self.engine.dispose()
