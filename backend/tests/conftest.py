import pytest
from biolink import create_app
from biolink.extensions import db


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", {"UPLOAD_FOLDER": str(tmp_path / "uploads")})

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    """Register + log in a user, returning bearer headers for them."""

    def _auth_headers(email="owner@example.com", password="s3cret-pass"):
        client.post("/api/v1/auth/register", json={"email": email, "password": password})
        resp = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200
        return {"Authorization": f"Bearer {resp.get_json()['access_token']}"}

    return _auth_headers


@pytest.fixture
def create_page(client):
    def _create_page(headers, title="My Links", description="All my stuff"):
        resp = client.post(
            "/api/v1/pages",
            json={"title": title, "description": description},
            headers=headers,
        )
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _create_page
