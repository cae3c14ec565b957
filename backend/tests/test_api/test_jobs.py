"""
Tests for Jobs API endpoints.
"""

import pytest


@pytest.mark.api
class TestJobsAPI:

    def test_get_jobs_empty(self, client):
        response = client.get("/api/v1/jobs/")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_job(self, client, auth_headers):
        response = client.post(
            "/api/v1/jobs/",
            json={
                "title": "  Data Analyst ",
                "courseId": "DA301",
                "requiredSkills": ["Excel", " SQL ", ""],
                "company": "DataDriven Co.",
                "jobType": "Hybrid"
            },
            headers=auth_headers
        )

        assert response.status_code == 201
        job = response.json()
        assert job["title"] == "Data Analyst"
        assert job["courseId"] == "DA301"
        assert job["requiredSkills"] == ["Excel", "SQL"]
        assert job["confidenceNeeded"] == 0

    def test_create_job_requires_auth(self, client):
        response = client.post("/api/v1/jobs/", json={"title": "Data Analyst"})
        assert response.status_code == 401

    def test_create_job_missing_title(self, client, auth_headers):
        response = client.post("/api/v1/jobs/", json={"courseId": "X"}, headers=auth_headers)

        assert response.status_code == 422
        assert any("title" in str(error["loc"]) for error in response.json()["errors"])

    def test_create_duplicate_title(self, client, auth_headers):
        client.post("/api/v1/jobs/", json={"title": "QA"}, headers=auth_headers)

        response = client.post("/api/v1/jobs/", json={"title": "QA"}, headers=auth_headers)

        assert response.status_code == 409
        assert response.json()["error_code"] == "DUPLICATE_RESOURCE"

    def test_list_in_catalog_order(self, client, auth_headers):
        for title in ["Zeta", "Alpha", "Mid"]:
            client.post("/api/v1/jobs/", json={"title": title}, headers=auth_headers)

        response = client.get("/api/v1/jobs/")

        assert [job["title"] for job in response.json()] == ["Zeta", "Alpha", "Mid"]

    def test_get_job_by_title(self, client, auth_headers):
        client.post(
            "/api/v1/jobs/",
            json={"title": "UI/UX Design Intern", "requiredSkills": ["Figma"]},
            headers=auth_headers
        )

        response = client.get("/api/v1/jobs/UI/UX Design Intern")

        assert response.status_code == 200
        assert response.json()["requiredSkills"] == ["Figma"]

    def test_get_job_not_found(self, client):
        response = client.get("/api/v1/jobs/Nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "Job not found"
