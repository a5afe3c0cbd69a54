"""Shared fixtures: an app on in-memory SQLite and authenticated clients."""

import pytest

from app import create_app
from app.extensions import db
from config import TestingConfig


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, email, name="Test User", password="password123"):
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.get_json()
    return {"Authorization": f"Bearer {response.get_json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register(client, "jane@example.com", name="Jane")


@pytest.fixture
def other_headers(client):
    return register(client, "mallory@example.com", name="Mallory")


@pytest.fixture
def profile(client, auth_headers):
    response = client.post(
        "/api/profile",
        json={
            "fullName": "Jane O'Brien-Smith",
            "email": "jane@example.com",
            "location": "Dublin",
            "linkedinUrl": "https://www.linkedin.com/in/jane",
            "professionalSummary": "Engineer who ships.",
            "profilePictureUrl": "https://cdn.example.com/jane.png",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()


@pytest.fixture
def other_profile(client, other_headers):
    response = client.post("/api/profile", json={"fullName": "Mallory"}, headers=other_headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


@pytest.fixture
def populated_profile(client, auth_headers, profile):
    """Profile with one entry of every child kind."""
    pid = profile["id"]
    children = [
        ("/api/work-experience", {
            "profileId": pid, "company": "Acme", "position": "Engineer",
            "startDate": "2020-01-01", "achievements": ["Shipped v2"],
        }),
        ("/api/education", {
            "profileId": pid, "institution": "Trinity College", "degree": "BSc",
            "startDate": "2014-09-01", "endDate": "2018-06-30", "gpa": 3.5,
        }),
        ("/api/skill", {"profileId": pid, "name": "Python", "category": "Languages"}),
        ("/api/project", {
            "profileId": pid, "name": "Tracker", "technologies": ["Flask"],
            "githubUrl": "https://github.com/jane/tracker",
        }),
        ("/api/certification", {
            "profileId": pid, "name": "CKA", "issuer": "CNCF", "issueDate": "2022-01-15",
        }),
        ("/api/language", {"profileId": pid, "name": "Irish", "proficiency": "Native"}),
    ]
    for url, payload in children:
        response = client.post(url, json=payload, headers=auth_headers)
        assert response.status_code == 201, response.get_json()
    return profile


@pytest.fixture
def job_posting(client, auth_headers):
    response = client.post(
        "/api/job-postings",
        json={
            "jobTitle": "Backend Engineer",
            "company": "Globex",
            "jobDescription": "Python and Docker, 3+ years, bachelor degree preferred.",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()
