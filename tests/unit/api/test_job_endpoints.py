"""
Tests for public job board endpoints.

Tests:
- GET /api/v1/jobs (search)
- GET /api/v1/jobs/{slug}
- POST /api/v1/jobs/{job_id}/views
- Companies and browse pages
- Health probes
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from api.services.sample_jobs import SAMPLE_JOB_ROWS


@pytest.fixture
def open_rows(row_factory):
    return [
        row_factory(id="1", title="Registered Nurse", employer_id="emp-hospital",
                    company_name="Blacktown Hospital", location="Blacktown",
                    categories=["Healthcare & Medical"]),
        row_factory(id="2", title="Junior Web Developer", employer_id="emp-tech",
                    company_name="Liverpool Tech Co", location="Liverpool",
                    job_type="contract", is_remote=True, is_featured=True,
                    categories=["Information Technology"], tags=["python"]),
        row_factory(id="3", title="Night Nurse", employer_id="emp-hospital",
                    company_name="Blacktown Hospital", location="Mount Druitt",
                    job_type="part_time", categories=["Healthcare & Medical"]),
    ]


def store_error():
    return OperationalError("SELECT", {}, Exception("connection refused"))


class TestSearchJobs:
    """Test the public search endpoint."""

    def test_lists_open_jobs_featured_first(self, client, open_rows):
        """Test every open job is listed with featured ones first."""
        with patch("api.services.jobs.fetch_open_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/jobs")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [job["id"] for job in data["items"]] == ["2", "1", "3"]

    def test_camel_case_fields(self, client, open_rows):
        """Test jobs are returned with camelCase keys."""
        with patch("api.services.jobs.fetch_open_job_rows", new=AsyncMock(return_value=open_rows)):
            job = client.get("/api/v1/jobs").json()["items"][0]

        assert job["companyId"] == "emp-tech"
        assert job["type"] == "Contract"
        assert job["isFilled"] is False
        assert job["slug"] == "junior-web-developer"

    @pytest.mark.parametrize("params,expected", [
        ({"q": "nurse"}, ["1", "3"]),
        ({"q": "python"}, ["2"]),
        ({"location": "mount"}, ["3"]),
        ({"type": "Part-time"}, ["3"]),
        ({"remote": "true"}, ["2"]),
        ({"company_id": "emp-hospital"}, ["1", "3"]),
        ({"category": "Information Technology"}, ["2"]),
        ({"q": "nurse", "location": "blacktown"}, ["1"]),
    ])
    def test_filters(self, client, open_rows, params, expected):
        """Test query parameters narrow the listing."""
        with patch("api.services.jobs.fetch_open_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/jobs", params=params)

        assert [job["id"] for job in response.json()["items"]] == expected

    def test_store_down_serves_samples(self, client):
        """Test a failed read falls back to the sample listings."""
        with patch("api.services.jobs.fetch_open_job_rows", new=AsyncMock(side_effect=store_error())):
            response = client.get("/api/v1/jobs")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == len(SAMPLE_JOB_ROWS)
        assert data["items"][0]["featured"] is True


class TestGetJob:
    """Test job lookup by slug."""

    def test_found(self, client, open_rows):
        """Test the slug resolves to the job."""
        with patch("api.services.jobs.fetch_unfilled_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/jobs/night-nurse")

        assert response.status_code == 200
        assert response.json()["id"] == "3"

    def test_not_found(self, client, open_rows):
        """Test unknown slugs return 404."""
        with patch("api.services.jobs.fetch_unfilled_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/jobs/astronaut")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Job not found"

    def test_sample_job_when_store_down(self, client):
        """Test sample jobs can be opened while the store is down."""
        with patch("api.services.jobs.fetch_unfilled_job_rows", new=AsyncMock(side_effect=store_error())):
            response = client.get("/api/v1/jobs/registered-nurse")

        assert response.status_code == 200
        assert response.json()["company"] == "Blacktown Hospital"


class TestRecordView:
    """Test the view counter."""

    def test_recorded(self, client):
        """Test a view is counted."""
        with patch("api.services.jobs.increment_job_views", new=AsyncMock(return_value=True)) as mock_inc:
            response = client.post("/api/v1/jobs/job-1/views")

        assert response.status_code == 200
        assert response.json()["message"] == "View recorded"
        assert mock_inc.await_args.args[1] == "job-1"

    def test_unknown_job(self, client):
        """Test an unknown job is not counted."""
        with patch("api.services.jobs.increment_job_views", new=AsyncMock(return_value=False)):
            response = client.post("/api/v1/jobs/missing/views")

        assert response.json()["message"] == "View not recorded"

    def test_failure_is_silent(self, client):
        """Test store failures never reach the visitor."""
        with patch("api.services.jobs.increment_job_views", new=AsyncMock(side_effect=store_error())):
            response = client.post("/api/v1/jobs/job-1/views")

        assert response.status_code == 200
        assert response.json()["message"] == "View not recorded"


class TestCompanies:
    """Test company endpoints."""

    def test_list_companies(self, client, open_rows, row_factory):
        """Test companies are projected from every job, filled ones included."""
        rows = open_rows + [
            row_factory(id="4", title="Barista", employer_id="emp-cafe",
                        company_name="Penrith Cafe", is_filled=True),
        ]
        with patch("api.services.jobs.fetch_all_job_rows", new=AsyncMock(return_value=rows)):
            response = client.get("/api/v1/companies")

        companies = {c["id"]: c for c in response.json()["items"]}
        assert companies["emp-hospital"]["openPositions"] == 2
        assert companies["emp-tech"]["openPositions"] == 1
        assert companies["emp-cafe"]["openPositions"] == 0

    def test_search_companies(self, client, open_rows):
        """Test the company list narrowed by name."""
        with patch("api.services.jobs.fetch_all_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/companies", params={"q": "liverpool"})

        assert [c["id"] for c in response.json()["items"]] == ["emp-tech"]

    def test_company_jobs(self, client, open_rows):
        """Test a company's open jobs."""
        with patch("api.services.jobs.fetch_open_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/companies/emp-hospital/jobs")

        assert [job["id"] for job in response.json()["items"]] == ["1", "3"]


class TestBrowse:
    """Test category and suburb pages."""

    def test_categories_with_counts(self, client, open_rows):
        """Test every category is listed with its open job count."""
        with patch("api.services.jobs.fetch_open_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/categories")

        data = response.json()
        assert data["total"] == 16
        counts = {entry["name"]: entry["job_count"] for entry in data["items"]}
        assert counts["Healthcare & Medical"] == 2
        assert counts["Legal"] == 0

    def test_category_jobs(self, client, open_rows):
        """Test a category page lists its jobs."""
        with patch("api.services.jobs.fetch_open_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/categories/healthcare-medical/jobs")

        assert [job["id"] for job in response.json()["items"]] == ["1", "3"]

    def test_unknown_category(self, client):
        """Test unknown category slugs return 404."""
        response = client.get("/api/v1/categories/astrology/jobs")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Category not found"

    def test_location_jobs(self, client, open_rows):
        """Test a suburb page lists jobs in that suburb."""
        with patch("api.services.jobs.fetch_open_job_rows", new=AsyncMock(return_value=open_rows)):
            response = client.get("/api/v1/locations/mount-druitt/jobs")

        assert [job["id"] for job in response.json()["items"]] == ["3"]

    def test_unknown_location(self, client):
        """Test suburbs outside Western Sydney return 404."""
        assert client.get("/api/v1/locations/bondi/jobs").status_code == 404


class TestHealth:
    """Test health probes."""

    def test_health(self, client):
        """Test the liveness probe."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, client, db_session):
        """Test readiness when the store answers."""
        response = client.get("/ready")

        assert response.status_code == 200
        db_session.execute.assert_awaited_once()

    def test_not_ready(self, client, db_session):
        """Test readiness when the store is down."""
        db_session.execute.side_effect = store_error()

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "unavailable"}
