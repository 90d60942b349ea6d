from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from portfolio_api.utils.error_handlers import register_exception_handlers


def make_app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internal detail")

    @app.get("/db-down")
    def db_down():
        raise OperationalError("SELECT 1", {}, Exception("could not connect to server"))

    return app


def test_uncaught_exception_becomes_generic_500():
    client = TestClient(make_app(), raise_server_exceptions=False)

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"message": "Something went wrong!"}
    assert "secret" not in response.text


def test_database_error_becomes_server_error():
    client = TestClient(make_app())

    response = client.get("/db-down")

    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}
    assert "connect" not in response.text


def test_unknown_route_uses_message_body(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
