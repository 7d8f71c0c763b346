import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine

from .models import Base, Category, TransactionType

logger = logging.getLogger(__name__)

# Global state for the application database
_current_engine: Engine | None = None
_current_session_factory: sessionmaker | None = None

# (name, type, icon, color) seeded once for every user to share
DEFAULT_CATEGORIES = [
    ("Food & Dining", TransactionType.EXPENSE, "🍔", "#FF6B6B"),
    ("Transportation", TransactionType.EXPENSE, "🚗", "#4ECDC4"),
    ("Shopping", TransactionType.EXPENSE, "🛍️", "#45B7D1"),
    ("Entertainment", TransactionType.EXPENSE, "🎮", "#96CEB4"),
    ("Bills & Utilities", TransactionType.EXPENSE, "📱", "#FFEAA7"),
    ("Healthcare", TransactionType.EXPENSE, "🏥", "#FD79A8"),
    ("Education", TransactionType.EXPENSE, "📚", "#A0E7E5"),
    ("Others", TransactionType.EXPENSE, "📦", "#B2B2B2"),
    ("Salary", TransactionType.INCOME, "💰", "#00B894"),
    ("Freelance", TransactionType.INCOME, "💼", "#00B894"),
    ("Investment", TransactionType.INCOME, "📈", "#00B894"),
    ("Others", TransactionType.INCOME, "💵", "#00B894"),
]


def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign keys for SQLite."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(db_url: str, **kwargs) -> Engine:
    """Create an engine, enabling SQLite pragmas when needed."""
    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(db_url, echo=False, connect_args=connect_args, **kwargs)
    if db_url.startswith("sqlite"):
        event.listen(engine, "connect", set_sqlite_pragma)
    return engine


def init_db(db_url: str) -> None:
    """
    Open the application database.

    Creates the tables if they don't exist and seeds the default categories.
    """
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        close_db()

    _current_engine = make_engine(db_url)
    _current_session_factory = sessionmaker(bind=_current_engine)

    Base.metadata.create_all(_current_engine)

    with _current_session_factory() as session:
        seed_default_categories(session)
        session.commit()

    logger.info("Database initialized at %s", _current_engine.url.render_as_string(hide_password=True))


def seed_default_categories(session: Session) -> int:
    """Insert the default categories unless some already exist. Returns the count added."""
    existing = session.query(Category).filter(Category.user_id.is_(None)).count()
    if existing:
        return 0

    for name, tx_type, icon, color in DEFAULT_CATEGORIES:
        session.add(Category(name=name, type=tx_type, icon=icon, color=color))
    session.flush()
    logger.info("Seeded %d default categories", len(DEFAULT_CATEGORIES))
    return len(DEFAULT_CATEGORIES)


def close_db() -> None:
    """Dispose of the current engine."""
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        _current_engine.dispose()
        _current_engine = None
        _current_session_factory = None


def get_session() -> Session:
    """Get a database session."""
    if _current_session_factory is None:
        raise RuntimeError("Database is not initialized")
    return _current_session_factory()


def get_db():
    """FastAPI dependency for database sessions."""
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def is_db_open() -> bool:
    """Check if the database has been initialized."""
    return _current_engine is not None
