"""Profile endpoints: one profile per user, ownership, validation."""


def test_create_profile(profile):
    assert profile["fullName"] == "Jane O'Brien-Smith"
    assert profile["workExperience"] == []
    assert profile["skills"] == []


def test_second_profile_conflicts(client, auth_headers, profile):
    response = client.post("/api/profile", json={"fullName": "Jane Again"}, headers=auth_headers)
    assert response.status_code == 409


def test_get_own_profile(client, auth_headers, profile):
    response = client.get("/api/profile/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()["id"] == profile["id"]

    response = client.get(f"/api/profile/{profile['id']}", headers=auth_headers)
    assert response.status_code == 200


def test_profile_read_embeds_children(client, auth_headers, populated_profile):
    data = client.get(f"/api/profile/{populated_profile['id']}", headers=auth_headers).get_json()
    assert [e["company"] for e in data["workExperience"]] == ["Acme"]
    assert [s["name"] for s in data["skills"]] == ["Python"]
    assert [l["name"] for l in data["languages"]] == ["Irish"]


def test_missing_profile_is_404(client, auth_headers):
    response = client.get("/api/profile/does-not-exist", headers=auth_headers)
    assert response.status_code == 404
    assert response.get_json()["error"] == "Profile with ID does-not-exist not found"


def test_profile_of_another_user_is_forbidden(client, other_headers, profile):
    assert client.get(f"/api/profile/{profile['id']}", headers=other_headers).status_code == 403
    assert client.patch(
        f"/api/profile/{profile['id']}", json={"location": "Cork"}, headers=other_headers
    ).status_code == 403


def test_patch_profile_only_touches_supplied_fields(client, auth_headers, profile):
    response = client.patch(f"/api/profile/{profile['id']}", json={"location": "Galway"}, headers=auth_headers)
    assert response.status_code == 200
    data = response.get_json()
    assert data["location"] == "Galway"
    assert data["fullName"] == "Jane O'Brien-Smith"


def test_profile_validation_collects_all_errors(client, auth_headers):
    response = client.post(
        "/api/profile",
        json={"fullName": "J" * 101, "githubUrl": "not a url"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    fields = {d["field"] for d in response.get_json()["details"]}
    assert fields == {"fullName", "githubUrl"}


def test_blank_optional_url_means_unset(client, auth_headers):
    response = client.post("/api/profile", json={"fullName": "Jane", "githubUrl": ""}, headers=auth_headers)
    assert response.status_code == 201
    assert response.get_json()["githubUrl"] is None


def test_delete_profile(client, auth_headers, populated_profile):
    pid = populated_profile["id"]
    assert client.delete(f"/api/profile/{pid}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/profile/{pid}", headers=auth_headers).status_code == 404
