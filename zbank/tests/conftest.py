import os
import tempfile

import pytest

os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(tempfile.gettempdir(), 'zbank_test.db')}")
os.environ.setdefault("ZBANK_ENV", "test")

from zbank.app import create_app, init_db  # noqa: E402
from zbank.db.session import engine, get_session  # noqa: E402
from zbank.models import Base  # noqa: E402


@pytest.fixture()
def app():
    app = create_app()
    with app.app_context():
        Base.metadata.drop_all(bind=engine)
        init_db(seed=True, environment="test")
    yield app
    with app.app_context():
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def session(app):
    session = get_session()
    try:
        yield session
    finally:
        session.close()
