"""CRUD for the entities that belong to a profile."""

import pytest


def _create(client, headers, url, payload):
    response = client.post(url, json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_work_experience_crud(client, auth_headers, profile):
    created = _create(client, auth_headers, "/api/work-experience", {
        "profileId": profile["id"],
        "company": "Acme",
        "position": "Engineer",
        "startDate": "2021-04-01",
        "achievements": ["Built the billing service"],
    })
    assert created["startDate"] == "2021-04-01"
    assert created["endDate"] is None

    url = f"/api/work-experience/{created['id']}"
    response = client.patch(url, json={"position": "Senior Engineer"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()["position"] == "Senior Engineer"
    assert response.get_json()["company"] == "Acme"

    assert client.delete(url, headers=auth_headers).status_code == 204
    response = client.get(url, headers=auth_headers)
    assert response.status_code == 404
    assert response.get_json()["error"] == f"Work experience with ID {created['id']} not found"


def test_work_experience_listed_newest_first(client, auth_headers, profile):
    for company, start in [("Old Co", "2015-01-01"), ("New Co", "2022-01-01"), ("Mid Co", "2018-01-01")]:
        _create(client, auth_headers, "/api/work-experience", {
            "profileId": profile["id"], "company": company, "position": "Dev", "startDate": start,
        })
    response = client.get(f"/api/work-experience?profileId={profile['id']}", headers=auth_headers)
    assert [e["company"] for e in response.get_json()] == ["New Co", "Mid Co", "Old Co"]


def test_skills_and_languages_listed_by_name(client, auth_headers, profile):
    for name in ["Rust", "Go", "Python"]:
        _create(client, auth_headers, "/api/skill", {"profileId": profile["id"], "name": name})
    for name in ["Spanish", "English"]:
        _create(client, auth_headers, "/api/language", {"profileId": profile["id"], "name": name})

    skills = client.get(f"/api/skill?profileId={profile['id']}", headers=auth_headers).get_json()
    languages = client.get(f"/api/language?profileId={profile['id']}", headers=auth_headers).get_json()
    assert [s["name"] for s in skills] == ["Go", "Python", "Rust"]
    assert [l["name"] for l in languages] == ["English", "Spanish"]


def test_certifications_listed_by_issue_date(client, auth_headers, profile):
    for name, issued in [("Older Cert", "2019-05-01"), ("Newer Cert", "2023-05-01")]:
        _create(client, auth_headers, "/api/certification", {
            "profileId": profile["id"], "name": name, "issuer": "Issuer", "issueDate": issued,
        })
    certs = client.get(f"/api/certification?profileId={profile['id']}", headers=auth_headers).get_json()
    assert [c["name"] for c in certs] == ["Newer Cert", "Older Cert"]


def test_list_requires_profile_id(client, auth_headers):
    response = client.get("/api/skill", headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["details"][0]["field"] == "profileId"


def test_education_validation_reports_every_field(client, auth_headers, profile):
    response = client.post("/api/education", json={
        "profileId": profile["id"],
        "institution": "X",
        "degree": "",
        "startDate": "not-a-date",
        "gpa": 5,
    }, headers=auth_headers)
    assert response.status_code == 400
    fields = {d["field"] for d in response.get_json()["details"]}
    assert {"institution", "degree", "startDate", "gpa"} <= fields


def test_unknown_field_is_rejected(client, auth_headers, profile):
    response = client.post("/api/skill", json={
        "profileId": profile["id"], "name": "Python", "rating": 5,
    }, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["details"][0]["field"] == "rating"


def test_patch_validates_against_merged_state(client, auth_headers, profile):
    created = _create(client, auth_headers, "/api/education", {
        "profileId": profile["id"], "institution": "Trinity", "degree": "BSc", "startDate": "2014-09-01",
    })
    url = f"/api/education/{created['id']}"

    response = client.patch(url, json={"gpa": 3.2}, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()["gpa"] == pytest.approx(3.2)

    response = client.patch(url, json={"degree": "B"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["details"][0]["field"] == "degree"


def test_creating_on_another_users_profile_is_forbidden(client, other_headers, profile):
    response = client.post("/api/skill", json={"profileId": profile["id"], "name": "Python"}, headers=other_headers)
    assert response.status_code == 403


def test_entries_of_another_user_are_forbidden(client, auth_headers, other_headers, profile):
    created = _create(client, auth_headers, "/api/skill", {"profileId": profile["id"], "name": "Python"})
    url = f"/api/skill/{created['id']}"
    assert client.get(url, headers=other_headers).status_code == 403
    assert client.delete(url, headers=other_headers).status_code == 403
    assert client.get(f"/api/skill?profileId={profile['id']}", headers=other_headers).status_code == 403


def test_moving_entry_to_foreign_profile_is_forbidden(client, auth_headers, profile, other_profile):
    created = _create(client, auth_headers, "/api/skill", {"profileId": profile["id"], "name": "Python"})
    response = client.patch(
        f"/api/skill/{created['id']}", json={"profileId": other_profile["id"]}, headers=auth_headers
    )
    assert response.status_code == 403
