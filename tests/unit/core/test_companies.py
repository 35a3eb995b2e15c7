"""
Tests for company aggregation and the browse catalogue.
"""

import pytest

from core.jobs.catalog import (
    JOB_CATEGORIES,
    WESTERN_SYDNEY_LOCATIONS,
    browse_slug,
    find_category,
    find_location,
)
from core.jobs.companies import aggregate_companies, filter_companies
from core.jobs.models import Company


class TestAggregateCompanies:
    """Test grouping jobs into companies."""

    def test_one_company_per_employer(self, job_factory):
        """Test jobs of the same employer collapse into one company."""
        jobs = [
            job_factory(id="1", employer_id="emp-1", company_name="Parramatta City Council"),
            job_factory(id="2", employer_id="emp-2", company_name="Blacktown Hospital"),
            job_factory(id="3", employer_id="emp-1", company_name="Parramatta City Council"),
        ]

        companies = aggregate_companies(jobs)

        assert [c.id for c in companies] == ["emp-1", "emp-2"]
        assert companies[0].open_positions == 2
        assert companies[1].open_positions == 1

    def test_filled_jobs_not_counted(self, job_factory):
        """Test filled jobs keep the company but not the opening."""
        jobs = [
            job_factory(id="1", employer_id="emp-1", is_filled=True),
            job_factory(id="2", employer_id="emp-1"),
            job_factory(id="3", employer_id="emp-2", is_filled=True),
        ]

        counts = {c.id: c.open_positions for c in aggregate_companies(jobs)}

        assert counts == {"emp-1": 1, "emp-2": 0}

    def test_last_job_wins_for_details(self, job_factory):
        """Test name, logo and website come from the last job seen."""
        jobs = [
            job_factory(id="1", employer_id="emp-1", company_name="Old Name",
                        company_logo="/old.png", company_website="https://old.example"),
            job_factory(id="2", employer_id="emp-1", company_name="New Name",
                        company_logo="/new.png", company_website="https://new.example"),
        ]

        company = aggregate_companies(jobs)[0]

        assert company.name == "New Name"
        assert company.logo == "/new.png"
        assert company.website == "https://new.example"

    def test_jobs_without_employer_skipped(self, job_factory):
        """Test jobs with no owner do not create a company."""
        assert aggregate_companies([job_factory(employer_id="")]) == []

    def test_open_positions_total(self, job_factory):
        """Test openings across companies sum to the unfilled jobs."""
        jobs = [
            job_factory(id=str(i), employer_id=f"emp-{i % 3}", is_filled=(i % 4 == 0))
            for i in range(12)
        ]

        companies = aggregate_companies(jobs)

        assert sum(c.open_positions for c in companies) == sum(not j.is_filled for j in jobs)

    def test_empty(self):
        """Test no jobs gives no companies."""
        assert aggregate_companies([]) == []


class TestFilterCompanies:
    """Test the company name search."""

    @pytest.fixture
    def companies(self):
        return [
            Company(id="emp-1", name="Parramatta City Council"),
            Company(id="emp-2", name="Blacktown Hospital"),
            Company(id="emp-3", name="Penrith City Council"),
        ]

    @pytest.mark.parametrize("search,expected", [
        ("council", ["emp-1", "emp-3"]),
        ("HOSPITAL", ["emp-2"]),
        ("  penrith ", ["emp-3"]),
        ("bakery", []),
    ])
    def test_name_search(self, companies, search, expected):
        """Test case-insensitive substring match on the name."""
        assert [c.id for c in filter_companies(companies, search)] == expected

    @pytest.mark.parametrize("search", [None, "", "   "])
    def test_blank_search_keeps_all(self, companies, search):
        """Test a blank search returns every company in order."""
        assert [c.id for c in filter_companies(companies, search)] == ["emp-1", "emp-2", "emp-3"]


class TestCatalog:
    """Test category and suburb lookups."""

    def test_sixteen_categories(self):
        """Test the category list is fixed."""
        assert len(JOB_CATEGORIES) == 16
        assert "Healthcare & Medical" in JOB_CATEGORIES

    @pytest.mark.parametrize("name,slug", [
        ("Accounting & Finance", "accounting-finance"),
        ("Healthcare & Medical", "healthcare-medical"),
        ("Mount Druitt", "mount-druitt"),
        ("Parramatta", "parramatta"),
    ])
    def test_browse_slug(self, name, slug):
        """Test browse page slugs."""
        assert browse_slug(name) == slug

    def test_find_category(self):
        """Test a category slug resolves to its name."""
        assert find_category("information-technology") == "Information Technology"
        assert find_category("astrology") is None

    def test_find_location(self):
        """Test a suburb slug resolves to its name."""
        assert find_location("st-marys") == "St Marys"
        assert find_location("bondi") is None

    def test_every_slug_resolves(self):
        """Test every category and suburb resolves from its own slug."""
        for category in JOB_CATEGORIES:
            assert find_category(browse_slug(category)) == category
        for location in WESTERN_SYDNEY_LOCATIONS:
            assert find_location(browse_slug(location)) == location
