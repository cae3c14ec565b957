"""
Tests for Skills API endpoints.

Covers uploads, retrieval and skill-based job matching.
"""

import pytest

from tests.conftest import signup_and_login


def create_jobs(client, headers, catalog):
    for title, data in catalog.items():
        response = client.post(
            "/api/v1/jobs/",
            json={"title": title, **data},
            headers=headers
        )
        assert response.status_code == 201, response.text


@pytest.mark.api
class TestSkillUploadAPI:

    def test_upload_and_get(self, client, auth_headers):
        response = client.post(
            "/api/v1/skills/upload",
            json={"skills": "Python, Machine Learning"},
            headers=auth_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Skills uploaded"
        assert data["skills"] == ["Python", "Machine Learning"]
        assert data["mergedSkills"] == ["Python", "Machine Learning"]

        response = client.get("/api/v1/skills/my", headers=auth_headers)
        assert response.json() == {"skills": ["Python", "Machine Learning"]}

    def test_upload_merges(self, client, auth_headers):
        client.post("/api/v1/skills/upload", json={"skills": "Python"}, headers=auth_headers)

        response = client.post(
            "/api/v1/skills/upload",
            json={"skills": "python, SQL, SQL"},
            headers=auth_headers
        )

        assert response.json()["mergedSkills"] == ["Python", "SQL"]

    @pytest.mark.parametrize("body", [{}, {"skills": ""}, {"skills": ["Python"]}, {"skills": 3}])
    def test_upload_requires_skills_string(self, client, auth_headers, body):
        response = client.post("/api/v1/skills/upload", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Skills string is required"

    def test_upload_requires_auth(self, client):
        response = client.post("/api/v1/skills/upload", json={"skills": "Python"})
        assert response.status_code == 401

    def test_my_skills_empty(self, client, auth_headers):
        response = client.get("/api/v1/skills/my", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"skills": []}

    def test_all_skills(self, client):
        alice = signup_and_login(client, "alice")
        bob = signup_and_login(client, "bob")
        client.post("/api/v1/skills/upload", json={"skills": "Go"}, headers=alice)
        client.post("/api/v1/skills/upload", json={"skills": "Rust"}, headers=bob)

        response = client.get("/api/v1/skills/all", headers=alice)

        assert response.status_code == 200
        records = response.json()["userSkills"]
        assert [record["skills"] for record in records] == [["Go"], ["Rust"]]
        assert all("userId" in record for record in records)


@pytest.mark.api
class TestSkillMatchAPI:

    def test_find_courses_by_match(self, client, auth_headers, sample_catalog):
        create_jobs(client, auth_headers, sample_catalog)
        client.post(
            "/api/v1/skills/upload",
            json={"skills": "react, JavaScript, CSS, SQL, Excel"},
            headers=auth_headers
        )

        response = client.get("/api/v1/skills/find-courses-by-match", headers=auth_headers)

        assert response.status_code == 200
        courses = response.json()["matchingCourses"]
        assert courses == [
            {
                "jobTitle": "Frontend Developer",
                "courseId": "FE101",
                "requiredSkills": ["React", "JavaScript", "CSS"],
                "matchedSkills": ["React", "JavaScript", "CSS"],
                "missingSkills": [],
                "matchPercent": 100,
            },
            {
                "jobTitle": "Data Analyst",
                "courseId": "DA301",
                "requiredSkills": ["Excel", "SQL", "Python"],
                "matchedSkills": ["Excel", "SQL"],
                "missingSkills": ["Python"],
                "matchPercent": 67,
            },
        ]

    def test_threshold_query(self, client, auth_headers, sample_catalog):
        create_jobs(client, auth_headers, sample_catalog)
        client.post("/api/v1/skills/upload", json={"skills": "React, JavaScript"}, headers=auth_headers)

        response = client.get(
            "/api/v1/skills/find-courses-by-match",
            params={"threshold": 40},
            headers=auth_headers
        )

        titles = [course["jobTitle"] for course in response.json()["matchingCourses"]]
        assert titles == ["Frontend Developer", "Mobile Developer"]

    @pytest.mark.parametrize("threshold", [-1, 101, "high"])
    def test_threshold_validated(self, client, auth_headers, threshold):
        response = client.get(
            "/api/v1/skills/find-courses-by-match",
            params={"threshold": threshold},
            headers=auth_headers
        )
        assert response.status_code == 422

    def test_no_skills_returns_empty(self, client, auth_headers, sample_catalog):
        create_jobs(client, auth_headers, sample_catalog)

        response = client.get("/api/v1/skills/find-courses-by-match", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"matchingCourses": []}

    def test_empty_catalog_returns_empty(self, client, auth_headers):
        client.post("/api/v1/skills/upload", json={"skills": "React"}, headers=auth_headers)

        response = client.get("/api/v1/skills/find-courses-by-match", headers=auth_headers)

        assert response.json() == {"matchingCourses": []}

    def test_requires_auth(self, client):
        response = client.get("/api/v1/skills/find-courses-by-match")
        assert response.status_code == 401

    def test_demo_match_is_public(self, client, auth_headers):
        client.post(
            "/api/v1/jobs/",
            json={"title": "Designer", "requiredSkills": ["Figma"], "confidenceNeeded": 80, "jobType": "On-site"},
            headers=auth_headers
        )
        client.post(
            "/api/v1/jobs/",
            json={"title": "Marketer", "requiredSkills": ["Canva"], "confidenceNeeded": 40, "jobType": "Remote"},
            headers=auth_headers
        )

        response = client.post(
            "/api/v1/skills/demo-match",
            json={"skills": [{"name": "figma", "confidence": 90}, {"name": "Canva", "confidence": 50}], "jobType": "Remote"}
        )

        assert response.status_code == 200
        assert [job["title"] for job in response.json()["jobs"]] == ["Marketer"]

    def test_demo_match_validates_confidence(self, client):
        response = client.post(
            "/api/v1/skills/demo-match",
            json={"skills": [{"name": "Figma", "confidence": 150}]}
        )
        assert response.status_code == 422
