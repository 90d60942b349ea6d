import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from main import app
from portfolio_api.dependencies import get_db
from portfolio_api.models.admin import Admin
from portfolio_api.services import email_service
from portfolio_api.utils.authentication import create_access_token

ADMIN_PASSCODE = "open-sesame"


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session):
    def get_db_override():
        return session

    app.dependency_overrides[get_db] = get_db_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="admin")
def admin_fixture(session):
    admin = Admin(passcode=ADMIN_PASSCODE, name="Akash")
    session.add(admin)
    session.commit()
    session.refresh(admin)
    return admin


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(admin):
    token = create_access_token(admin.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(name="sent_emails")
def sent_emails_fixture(monkeypatch):
    """Capture outgoing emails instead of calling the mail API."""
    sent = []

    def fake_send_email(to, subject, text, html_body):
        sent.append({"to": to, "subject": subject, "text": text, "html": html_body})
        return True

    monkeypatch.setattr(email_service, "send_email", fake_send_email)
    return sent


@pytest.fixture(name="failing_email")
def failing_email_fixture(monkeypatch):
    attempts = []

    def fake_send_email(to, subject, text, html_body):
        attempts.append(to)
        return False

    monkeypatch.setattr(email_service, "send_email", fake_send_email)
    return attempts

