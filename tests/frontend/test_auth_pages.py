"""
Tests for the placeholder login and signup pages.
"""

import pytest


class TestLogin:
    def test_form_renders(self, client):
        response = client.get("/auth/login")

        assert response.status_code == 200
        assert "Welcome Back!" in response.text

    def test_valid_login_redirects_home(self, client):
        response = client.post(
            "/auth/login",
            data={"email": "jane@example.com", "password": "secret1"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/"

    @pytest.mark.parametrize(
        "data, message",
        [
            ({"email": "not-an-email", "password": "secret1"}, "Please enter a valid email address."),
            ({"email": "jane@example.com", "password": "123"}, "Password must be at least 6 characters long."),
        ],
    )
    def test_invalid_login(self, client, data, message):
        response = client.post("/auth/login", data=data)

        assert response.status_code == 422
        assert message in response.text

    def test_password_is_not_echoed(self, client):
        response = client.post(
            "/auth/login", data={"email": "bad", "password": "hunter2-secret"}
        )

        assert "hunter2-secret" not in response.text
        assert 'value="bad"' in response.text


class TestSignup:
    @pytest.mark.parametrize("role, expected", [("employer", "employer"), ("seeker", "seeker"), ("admin", "seeker")])
    def test_initial_role(self, client, role, expected):
        response = client.get("/auth/signup", params={"role": role})

        assert response.status_code == 200
        assert f'value="{expected}" checked' in response.text

    def test_default_role_is_seeker(self, client):
        response = client.get("/auth/signup")

        assert 'value="seeker" checked' in response.text

    def test_valid_signup_redirects_to_login(self, client):
        response = client.post(
            "/auth/signup",
            data={"name": "Jane Doe", "email": "jane@example.com", "password": "secret1", "role": "employer"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/auth/login"

    def test_invalid_signup(self, client):
        response = client.post(
            "/auth/signup",
            data={"name": "J", "email": "jane@example.com", "password": "secret1", "role": "admin"},
        )

        assert response.status_code == 422
        assert "Name must be at least 2 characters long." in response.text
        assert "Please select your role." in response.text
