"""
Tests for the skill, job and user services against an in-memory database.
"""

import pytest

from app.core.exceptions import (
    ConfigurationException,
    DuplicateResourceException,
    InvalidCredentialsException,
    InvalidSkillsInputException,
    JobNotFoundException,
    MissingFieldsException,
    UserAlreadyExistsException,
    ValidationException,
)
from app.core.security import SecurityManager
from app.repositories.job_repository import JobRepository
from app.repositories.skill_repository import UserSkillRepository
from app.repositories.user_repository import UserRepository
from app.schemas.job import JobCreate
from app.services.job_service import JobService
from app.services.skill_matcher import RatedSkill, merge
from app.services.skill_service import SkillService
from app.services.user_service import UserService


@pytest.fixture
def skill_service(database):
    return SkillService(UserSkillRepository(database), JobRepository(database))


@pytest.fixture
def job_service(database):
    return JobService(JobRepository(database))


@pytest.fixture
def user_service(database):
    return UserService(UserRepository(database), SecurityManager(secret_key="unit-test-secret"))


@pytest.mark.asyncio
class TestSkillService:

    async def test_first_upload_creates_record(self, skill_service, user_service):
        user = await user_service.signup("bob", "pw-12345", "student")

        result = await skill_service.upload_skills(user.id, "Python, SQL")

        assert result == {"parsed": ["Python", "SQL"], "merged": ["Python", "SQL"]}
        assert await skill_service.get_skills(user.id) == ["Python", "SQL"]

    async def test_upload_merges_case_insensitively(self, skill_service, user_service):
        user = await user_service.signup("bob", "pw-12345", "student")
        await skill_service.upload_skills(user.id, "Python")

        result = await skill_service.upload_skills(user.id, "python, SQL, SQL")

        assert result["parsed"] == ["python", "SQL", "SQL"]
        assert result["merged"] == ["Python", "SQL"]
        assert await skill_service.get_skills(user.id) == ["Python", "SQL"]

    async def test_reupload_is_noop(self, skill_service, user_service):
        user = await user_service.signup("bob", "pw-12345", "student")
        first = await skill_service.upload_skills(user.id, "Excel, Machine Learning")
        second = await skill_service.upload_skills(user.id, "Excel, Machine Learning")
        assert first["merged"] == second["merged"] == ["Excel", "Machine Learning"]

    @pytest.mark.parametrize("raw", [None, "", 42, ["Python"]])
    async def test_upload_rejects_non_string(self, skill_service, raw):
        with pytest.raises(InvalidSkillsInputException):
            await skill_service.upload_skills(1, raw)

    async def test_unknown_user_has_no_skills(self, skill_service):
        assert await skill_service.get_skills(999) == []

    async def test_get_all_skills(self, skill_service, user_service):
        alice = await user_service.signup("alice", "pw-12345", "student")
        bob = await user_service.signup("bob", "pw-12345", "student")
        await skill_service.upload_skills(bob.id, "Go")
        await skill_service.upload_skills(alice.id, "Rust")

        assert await skill_service.get_all_skills() == [
            {"user_id": alice.id, "skills": ["Rust"]},
            {"user_id": bob.id, "skills": ["Go"]},
        ]

    async def test_find_matches_uses_catalog_order(self, skill_service, job_service, user_service, sample_catalog):
        await job_service.import_catalog(sample_catalog)
        user = await user_service.signup("carol", "pw-12345", "student")
        await skill_service.upload_skills(user.id, "react, JavaScript, css, Excel, SQL")

        results = await skill_service.find_matches(user.id)

        assert [r.job_title for r in results] == ["Frontend Developer", "Data Analyst"]
        assert results[0].match_percent == 100
        assert results[1].match_percent == 67
        assert results[1].missing_skills == ["Python"]

    async def test_find_matches_custom_threshold(self, skill_service, job_service, user_service, sample_catalog):
        await job_service.import_catalog(sample_catalog)
        user = await user_service.signup("carol", "pw-12345", "student")
        await skill_service.upload_skills(user.id, "React, JavaScript")

        results = await skill_service.find_matches(user.id, threshold=40)

        assert [(r.job_title, r.match_percent) for r in results] == [
            ("Frontend Developer", 67),
            ("Mobile Developer", 40),
        ]

    async def test_find_matches_without_skills(self, skill_service, job_service, sample_catalog):
        await job_service.import_catalog(sample_catalog)
        assert await skill_service.find_matches(123) == []

    async def test_demo_match(self, skill_service, job_service):
        await job_service.import_catalog({
            "Designer": {"requiredSkills": ["Figma"], "confidenceNeeded": 80, "type": "On-site"},
            "Analyst": {"requiredSkills": ["SQL"], "confidenceNeeded": 50, "type": "Remote"},
        })

        jobs = await skill_service.demo_match([RatedSkill("figma", 85), RatedSkill("SQL", 10)])

        assert [job.title for job in jobs] == ["Designer"]


@pytest.mark.asyncio
class TestUserSkillRepository:

    async def test_first_upload_retries_after_concurrent_create(self, database, user_service, monkeypatch):
        user = await user_service.signup("dave", "pw-12345", "student")
        repo = UserSkillRepository(database)
        await repo.update_skills(user.id, lambda skills: skills + ["Python"])

        load_for_update = repo._load_for_update
        reads = []

        async def miss_first_read(session, user_id):
            # First read happens before the competing insert committed
            reads.append(user_id)
            if len(reads) == 1:
                return None
            return await load_for_update(session, user_id)

        monkeypatch.setattr(repo, "_load_for_update", miss_first_read)

        result = await repo.update_skills(user.id, lambda skills: merge(skills, "SQL"))

        assert result == ["Python", "SQL"]
        assert len(reads) == 2
        assert await repo.get_skills(user.id) == ["Python", "SQL"]


@pytest.mark.asyncio
class TestJobService:

    async def test_import_catalog_upserts_by_title(self, job_service, sample_catalog):
        assert await job_service.import_catalog(sample_catalog) == {"created": 4, "updated": 0}

        counts = await job_service.import_catalog({
            "Data Analyst": {"courseId": "DA302", "requiredSkills": ["SQL"]},
            "New Role": {"requiredSkills": ["Go"]},
        })

        assert counts == {"created": 1, "updated": 1}
        titles = [job.title for job in await job_service.list_jobs()]
        assert titles == [
            "Frontend Developer", "Mobile Developer", "Data Analyst", "Unspecified Role", "New Role"
        ]
        analyst = await job_service.get_job("Data Analyst")
        assert analyst.course_id == "DA302"
        assert list(analyst.required_skills) == ["SQL"]

    async def test_import_rejects_non_object_entry(self, job_service):
        with pytest.raises(ValidationException):
            await job_service.import_catalog({"Broken": ["SQL"]})

    @pytest.mark.parametrize("entry,field", [
        ({"requiredSkills": ["Go", 5]}, "requiredSkills.1"),
        ({"requiredSkills": ["Go", None]}, "requiredSkills.1"),
        ({"requiredSkills": "React"}, "requiredSkills"),
        ({"requiredSkills": ["Go"], "confidenceNeeded": "high"}, "confidenceNeeded"),
        ({"requiredSkills": ["Go"], "confidenceNeeded": 150}, "confidenceNeeded"),
        ({"requiredSkills": ["Go"], "confidenceNeeded": -1}, "confidenceNeeded"),
    ])
    async def test_import_rejects_invalid_fields(self, job_service, entry, field):
        with pytest.raises(ValidationException) as exc_info:
            await job_service.import_catalog({"Good": {"requiredSkills": ["SQL"]}, "Bad": entry})

        assert field in exc_info.value.field_errors
        assert "'Bad'" in exc_info.value.message
        assert exc_info.value.http_status == 400
        assert await job_service.list_jobs() == []

    async def test_import_reads_catalog_file_fields(self, job_service):
        await job_service.import_catalog({
            "  Designer ": {
                "courseId": 42,
                "type": "On-site",
                "confidenceNeeded": None,
                "requiredSkills": [" Figma ", ""],
            },
            "Bare": {"requiredSkills": None},
        })

        designer = await job_service.get_job("Designer")
        assert designer.course_id == "42"
        assert designer.job_type == "On-site"
        assert designer.confidence_needed == 0
        assert list(designer.required_skills) == ["Figma"]
        assert list((await job_service.get_job("Bare")).required_skills) == []

    async def test_rejected_import_keeps_matching_working(self, job_service, skill_service, user_service):
        user = await user_service.signup("bob", "pw-12345", "student")
        await skill_service.upload_skills(user.id, "React")
        await job_service.import_catalog({"Good": {"courseId": "G1", "requiredSkills": ["React"]}})

        with pytest.raises(ValidationException):
            await job_service.import_catalog({"Bad": {"requiredSkills": ["Go", 5]}})

        results = await skill_service.find_matches(user.id)
        assert [result.job_title for result in results] == ["Good"]

    async def test_import_missing_file(self, job_service, tmp_path):
        with pytest.raises(ConfigurationException):
            await job_service.import_catalog_file(str(tmp_path / "missing.json"))

    async def test_create_and_duplicate(self, job_service):
        job = await job_service.create_job(JobCreate(title="QA Engineer", required_skills=["Testing"]))
        assert job.title == "QA Engineer"

        with pytest.raises(DuplicateResourceException):
            await job_service.create_job(JobCreate(title="QA Engineer"))

    async def test_get_unknown_job(self, job_service):
        with pytest.raises(JobNotFoundException):
            await job_service.get_job("Nope")


@pytest.mark.asyncio
class TestUserService:

    async def test_signup_hashes_password(self, user_service):
        user = await user_service.signup("dana", "pw-12345", "company")
        assert user.id is not None
        assert user.user_type == "company"
        assert user.hashed_password != "pw-12345"

    async def test_signup_requires_all_fields(self, user_service):
        with pytest.raises(MissingFieldsException) as exc_info:
            await user_service.signup("dana", "", None)
        assert set(exc_info.value.field_errors) == {"password", "type"}

    async def test_duplicate_username(self, user_service):
        await user_service.signup("dana", "pw-12345", "student")
        with pytest.raises(UserAlreadyExistsException):
            await user_service.signup("dana", "other-pw", "student")

    async def test_login_issues_verifiable_token(self, user_service):
        user = await user_service.signup("erin", "pw-12345", "student")

        token, logged_in = await user_service.login("erin", "pw-12345")

        payload = user_service.security.verify_token(token)
        assert logged_in.id == user.id
        assert payload["sub"] == str(user.id)
        assert payload["type"] == "student"

    async def test_login_wrong_password(self, user_service):
        await user_service.signup("erin", "pw-12345", "student")
        with pytest.raises(InvalidCredentialsException):
            await user_service.login("erin", "wrong")

    async def test_login_unknown_user(self, user_service):
        with pytest.raises(InvalidCredentialsException):
            await user_service.login("ghost", "pw-12345")
