"""Job postings are scoped to the caller and carry derived keywords."""


def test_keywords_derived_on_create(job_posting):
    assert job_posting["keywords"] == ["python", "docker", "3+ years", "bachelor", "degree"]
    assert job_posting["requiredSkills"] == []


def test_keywords_rederived_when_description_changes(client, auth_headers, job_posting):
    response = client.patch(
        f"/api/job-postings/{job_posting['id']}",
        json={"jobDescription": "Kubernetes on AWS"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.get_json()["keywords"] == ["kubernetes", "aws"]


def test_keywords_kept_when_description_untouched(client, auth_headers, job_posting):
    response = client.patch(
        f"/api/job-postings/{job_posting['id']}", json={"company": "Initech"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.get_json()["company"] == "Initech"
    assert response.get_json()["keywords"] == job_posting["keywords"]


def test_list_only_shows_own_postings(client, auth_headers, other_headers, job_posting):
    assert [j["id"] for j in client.get("/api/job-postings", headers=auth_headers).get_json()] == [job_posting["id"]]
    assert client.get("/api/job-postings", headers=other_headers).get_json() == []
    assert client.get(f"/api/job-postings/{job_posting['id']}", headers=other_headers).status_code == 403


def test_job_posting_requires_title_and_description(client, auth_headers):
    response = client.post("/api/job-postings", json={"company": "Globex"}, headers=auth_headers)
    assert response.status_code == 400
    fields = {d["field"] for d in response.get_json()["details"]}
    assert fields == {"jobTitle", "jobDescription"}


def test_delete_job_posting(client, auth_headers, job_posting):
    url = f"/api/job-postings/{job_posting['id']}"
    assert client.delete(url, headers=auth_headers).status_code == 204
    assert client.get(url, headers=auth_headers).status_code == 404
