"""SQLAlchemy model and storage access for the equipment directory."""

from contextlib import contextmanager
from datetime import datetime

from sqlalchemy import delete, desc, update
from sqlalchemy.exc import SQLAlchemyError

from extensions import db

# ---------- Наборы значений ----------
ALLOWED_STATUSES = ["Normal", "UnderMaintenance", "Faulty"]
DEFAULT_STATUS = "Normal"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _now() -> datetime:
    # second precision, the same resolution the API reports
    return datetime.now().replace(microsecond=0)


class Equipment(db.Model):
    """One physical unit of tracked equipment."""

    __tablename__ = "equipment"
    # не переиспользовать id после удаления (SQLite без AUTOINCREMENT берёт max+1)
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column("equip_id", db.Integer, primary_key=True)
    name = db.Column("equip_name", db.String(255), nullable=False)
    manager = db.Column(db.String(120))
    status = db.Column(db.String(32), default=DEFAULT_STATUS)
    location = db.Column(db.String(120))
    updated_at = db.Column(db.DateTime, nullable=False, default=_now)

    def to_dict(self) -> dict:
        return {
            "identifier": self.id,
            "name": self.name,
            "manager": self.manager,
            "status": self.status,
            "location": self.location,
            "lastUpdated": self.updated_at.strftime(TIMESTAMP_FORMAT) if self.updated_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Equipment {self.id}: {self.name}>"


class EquipmentStore:
    """
    Доступ к таблице EQUIPMENT: один SQL-оператор на вызов.

    Every method runs on the request's scoped session and commits right away.
    On a driver error the session is rolled back and the error re-raised;
    Flask-SQLAlchemy removes the session when the app context ends, which
    hands the connection back to the pool on every path.
    """

    def __init__(self, database) -> None:
        self.db = database

    @contextmanager
    def _statement(self):
        session = self.db.session
        try:
            yield session
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            raise

    def list_all(self) -> list[Equipment]:
        session = self.db.session
        try:
            return session.query(Equipment).order_by(desc(Equipment.id)).all()
        except SQLAlchemyError:
            session.rollback()
            raise

    def create(self, name: str, manager, status: str, location) -> int:
        """INSERT one row; returns the identifier storage assigned."""
        eq = Equipment(
            name=name,
            manager=manager,
            status=status,
            location=location,
            updated_at=_now(),
        )
        with self._statement() as session:
            session.add(eq)
            session.flush()
            equip_id = eq.id
        return equip_id

    def _update(self, equip_id: int, **values) -> int:
        stmt = (
            update(Equipment)
            .where(Equipment.id == equip_id)
            .values(updated_at=_now(), **values)
            .execution_options(synchronize_session=False)
        )
        with self._statement() as session:
            rowcount = session.execute(stmt).rowcount
        return rowcount

    def replace(self, equip_id: int, name, manager, status, location) -> int:
        """Overwrite every editable field; returns rows affected."""
        return self._update(
            equip_id, name=name, manager=manager, status=status, location=location
        )

    def set_status(self, equip_id: int, status: str) -> int:
        return self._update(equip_id, status=status)

    def delete(self, equip_id: int) -> int:
        stmt = (
            delete(Equipment)
            .where(Equipment.id == equip_id)
            .execution_options(synchronize_session=False)
        )
        with self._statement() as session:
            rowcount = session.execute(stmt).rowcount
        return rowcount
