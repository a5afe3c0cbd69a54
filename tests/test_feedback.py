def test_submit_feedback(client, auth_headers):
    response = client.post(
        "/api/feedback", json={"description": "The PDF export works nicely."}, headers=auth_headers
    )
    assert response.status_code == 201
    listed = client.get("/api/feedback", headers=auth_headers).get_json()
    assert [f["description"] for f in listed] == ["The PDF export works nicely."]


def test_feedback_too_short(client, auth_headers):
    response = client.post("/api/feedback", json={"description": "meh"}, headers=auth_headers)
    assert response.status_code == 400
    assert "at least 10 characters" in response.get_json()["details"][0]["message"]


def test_feedback_is_private(client, auth_headers, other_headers):
    client.post("/api/feedback", json={"description": "Only Jane should see this."}, headers=auth_headers)
    assert client.get("/api/feedback", headers=other_headers).get_json() == []
