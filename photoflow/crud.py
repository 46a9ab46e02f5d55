import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from sqlalchemy import delete
from sqlalchemy.orm import Session
from . import config, models
from .database import Base, make_engine, make_session_factory
from .enums import TaskStatus
from .templates import template_for

logger = logging.getLogger(__name__)

# Never written by update(); id/created_at/seq are also never taken from insert payloads.
PROTECTED_FIELDS = frozenset({"seq", "id", "created_at", "project_id"})
GENERATED_FIELDS = frozenset({"seq", "id", "created_at"})


class EntityStore:
    """Storage for a single entity kind, keyed by its opaque string id."""

    def __init__(self, storage: "Storage", model):
        self._storage = storage
        self.model = model
        self.columns = frozenset(column.key for column in model.__table__.columns)

    @property
    def kind(self) -> str:
        return self.model.__name__

    def insert(self, fields: dict):
        with self._storage.session() as db:
            return self.add(db, fields)

    def get(self, record_id: str):
        with self._storage.session() as db:
            return self.find(db, record_id)

    def list(self):
        with self._storage.session() as db:
            return db.query(self.model).order_by(self.model.seq).all()

    def list_by_project(self, project_id: str):
        if "project_id" not in self.columns:
            raise TypeError(f"{self.kind} records are not owned by a project")
        with self._storage.session() as db:
            return (
                db.query(self.model)
                .filter(self.model.project_id == project_id)
                .order_by(self.model.seq)
                .all()
            )

    def list_in_range(self, field: str, start: datetime, end: datetime):
        """Records whose `field` lies in [start, end), in insertion order."""
        col = getattr(self.model, field)
        with self._storage.session() as db:
            return (
                db.query(self.model)
                .filter(col.is_not(None), col >= start, col < end)
                .order_by(self.model.seq)
                .all()
            )

    def update(self, record_id: str, fields: dict):
        with self._storage.session() as db:
            record = self.find(db, record_id)
            if not record:
                return None
            for field, value in fields.items():
                if field in PROTECTED_FIELDS:
                    logger.debug("Ignoring write to protected field %s.%s", self.kind, field)
                    continue
                if field in self.columns:
                    setattr(record, field, value)
            return record

    def delete(self, record_id: str) -> bool:
        with self._storage.session() as db:
            record = self.find(db, record_id)
            if not record:
                return False
            db.delete(record)
            return True

    # Session-level helpers, shared with the cascade so it can run in one transaction.

    def find(self, db: Session, record_id: str):
        return db.query(self.model).filter(self.model.id == record_id).first()

    def add(self, db: Session, fields: dict):
        values = {
            field: value
            for field, value in fields.items()
            if field in self.columns and field not in GENERATED_FIELDS and value is not None
        }
        record = self.model(id=models.new_id(), **values)
        if "created_at" in self.columns:
            record.created_at = datetime.now()
        db.add(record)
        db.flush()
        return record


class Storage:
    """In-process store for every entity kind.

    All operations go through one re-entrant lock, so a cascading project
    delete is never observed half-applied.
    """

    def __init__(self, database_url: str = None):
        self.database_url = database_url or config.DATABASE_URL
        self.engine = make_engine(self.database_url)
        self._session_factory = make_session_factory(self.engine)
        self._lock = threading.RLock()
        Base.metadata.create_all(bind=self.engine)

        self.projects = EntityStore(self, models.Project)
        self.tasks = EntityStore(self, models.Task)
        self.contacts = EntityStore(self, models.Contact)
        self.budget_items = EntityStore(self, models.BudgetItem)
        self.calendar_events = EntityStore(self, models.CalendarEvent)
        logger.info("Storage ready at %s", self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def session(self):
        with self._lock:
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def locked(self):
        """Hold the store lock across several reads that must agree with each other."""
        return self._lock

    def dependents(self):
        return (self.tasks, self.contacts, self.budget_items, self.calendar_events)

    def reset(self):
        with self._lock:
            Base.metadata.drop_all(bind=self.engine)
            Base.metadata.create_all(bind=self.engine)
        logger.info("Storage reset")

    def create_project(self, fields: dict):
        """Insert a project and seed its template tasks, in template order."""
        with self.session() as db:
            project = self.projects.add(db, fields)
            skeletons = template_for(project.type)
            for skeleton in skeletons:
                self.tasks.add(db, {
                    "project_id": project.id,
                    "title": skeleton.title,
                    "section": skeleton.section,
                    "status": TaskStatus.TODO.value,
                    "assignee": "",
                })
        logger.info("Created project %s (%s) with %d template tasks", project.id, project.type, len(skeletons))
        return project

    def delete_project(self, project_id: str) -> bool:
        """Delete a project and every record it owns, atomically."""
        with self.session() as db:
            project = self.projects.find(db, project_id)
            if not project:
                return False
            db.delete(project)
            removed = {}
            for store in self.dependents():
                result = db.execute(
                    delete(store.model)
                    .where(store.model.project_id == project_id)
                    .execution_options(synchronize_session=False)
                )
                removed[store.model.__tablename__] = result.rowcount
        logger.info("Deleted project %s; cascade removed %s", project_id, removed)
        return True
