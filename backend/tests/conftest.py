import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from expense_tracker.database import get_db, make_engine, seed_default_categories
from expense_tracker.main import app
from expense_tracker.models import Base
from expense_tracker.services import AuthService


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        seed_default_categories(session)
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user(session):
    return AuthService(session).register("Alice", "alice@example.com", "secret1")


@pytest.fixture
def other_user(session):
    return AuthService(session).register("Bob", "bob@example.com", "secret2")


@pytest.fixture
def client(engine):
    factory = sessionmaker(bind=engine)

    def override_get_db():
        session = factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the lifespan (real database) never runs
    yield TestClient(app)
    app.dependency_overrides.clear()
