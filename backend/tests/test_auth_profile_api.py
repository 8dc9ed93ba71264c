import io
import os


class TestAuth:
    def test_register_and_login(self, client):
        resp = client.post(
            "/api/v1/auth/register", json={"email": "New@Example.com", "password": "pw"}
        )
        assert resp.status_code == 201
        assert resp.get_json()["email"] == "new@example.com"

        resp = client.post(
            "/api/v1/auth/login", json={"email": "new@example.com", "password": "pw"}
        )
        assert resp.status_code == 200
        assert resp.get_json()["access_token"]

    def test_duplicate_email(self, client):
        payload = {"email": "dup@example.com", "password": "pw"}
        client.post("/api/v1/auth/register", json=payload)

        assert client.post("/api/v1/auth/register", json=payload).status_code == 409

    def test_bad_credentials(self, client):
        client.post("/api/v1/auth/register", json={"email": "u@example.com", "password": "right"})

        resp = client.post("/api/v1/auth/login", json={"email": "u@example.com", "password": "wrong"})
        assert resp.status_code == 401

    def test_missing_fields(self, client):
        assert client.post("/api/v1/auth/register", json={"email": "x@example.com"}).status_code == 400
        assert client.post("/api/v1/auth/login", json={}).status_code == 400

    def test_disabled_user_rejected(self, app, client, auth_headers):
        from biolink.extensions import db
        from biolink.models.user import User

        headers = auth_headers("gone@example.com")
        user = User.query.filter_by(email="gone@example.com").first()
        user.is_active = False
        db.session.commit()

        assert client.get("/api/v1/pages", headers=headers).status_code == 403


class TestAvatar:
    def test_no_avatar_yet(self, client, auth_headers):
        resp = client.get("/api/v1/profile/avatar", headers=auth_headers())
        assert resp.status_code == 200
        assert resp.get_json()["avatar_url"] is None

    def test_replace_avatar_deletes_previous_upload(self, app, client, auth_headers):
        headers = auth_headers()
        first = client.post(
            "/api/v1/media",
            data={"file": (io.BytesIO(b"one"), "one.png")},
            headers=headers,
            content_type="multipart/form-data",
        ).get_json()["url"]

        client.put("/api/v1/profile/avatar", json={"image_url": first}, headers=headers)
        resp = client.put(
            "/api/v1/profile/avatar",
            json={"image_url": "https://cdn.example.com/two.png"},
            headers=headers,
        )

        assert resp.status_code == 200
        assert resp.get_json()["avatar_url"] == "https://cdn.example.com/two.png"
        stored = os.path.join(app.config["UPLOAD_FOLDER"], first.rsplit("/", 1)[1])
        assert not os.path.exists(stored)

    def test_image_url_required(self, client, auth_headers):
        resp = client.put("/api/v1/profile/avatar", json={}, headers=auth_headers())
        assert resp.status_code == 400


class TestMedia:
    def test_upload_and_serve(self, client, auth_headers):
        headers = auth_headers()
        resp = client.post(
            "/api/v1/media",
            data={"file": (io.BytesIO(b"GIF89a"), "Party Pic.GIF")},
            headers=headers,
            content_type="multipart/form-data",
        )

        assert resp.status_code == 201
        url = resp.get_json()["url"]
        assert url.startswith("/media/") and url.endswith(".gif")

        served = client.get(url)
        assert served.status_code == 200
        assert served.data == b"GIF89a"
        served.close()

    def test_rejects_non_images(self, client, auth_headers):
        resp = client.post(
            "/api/v1/media",
            data={"file": (io.BytesIO(b"#!/bin/sh"), "evil.sh")},
            headers=auth_headers(),
            content_type="multipart/form-data",
        )
        assert resp.status_code == 400

    def test_requires_file(self, client, auth_headers):
        resp = client.post(
            "/api/v1/media", data={}, headers=auth_headers(), content_type="multipart/form-data"
        )
        assert resp.status_code == 400

    def test_requires_token(self, client):
        assert client.post("/api/v1/media").status_code == 401


class TestChangeEmail:
    def test_change_email_and_login_with_it(self, client, auth_headers):
        headers = auth_headers("old@example.com", "pw-123")

        resp = client.put("/api/v1/profile/email", json={"email": "New@Example.com"}, headers=headers)

        assert resp.status_code == 200
        assert resp.get_json()["email"] == "new@example.com"
        login = client.post("/api/v1/auth/login", json={"email": "new@example.com", "password": "pw-123"})
        assert login.status_code == 200
        old = client.post("/api/v1/auth/login", json={"email": "old@example.com", "password": "pw-123"})
        assert old.status_code == 401

    def test_email_already_taken(self, client, auth_headers):
        auth_headers("taken@example.com")
        headers = auth_headers("me@example.com")

        resp = client.put("/api/v1/profile/email", json={"email": "taken@example.com"}, headers=headers)
        assert resp.status_code == 409

    def test_invalid_email(self, client, auth_headers):
        headers = auth_headers()
        assert client.put("/api/v1/profile/email", json={"email": 7}, headers=headers).status_code == 400
        assert client.put("/api/v1/profile/email", json={}, headers=headers).status_code == 400

    def test_requires_token(self, client):
        assert client.put("/api/v1/profile/email", json={"email": "a@b.c"}).status_code == 401
