"""Static listings served when the record store cannot be read."""

from datetime import datetime, timedelta, timezone

_POSTED = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)

SAMPLE_JOB_ROWS = [
    {
        "id": "sample-1",
        "employer_id": "sample-employer-parramatta-council",
        "title": "Administration Officer",
        "description": (
            "Join our customer service team supporting residents across the "
            "Parramatta local government area. You will handle enquiries, "
            "process applications and keep records up to date."
        ),
        "company_name": "Parramatta City Council",
        "company_logo": None,
        "company_website": "https://www.cityofparramatta.nsw.gov.au",
        "location": "Parramatta",
        "salary_min": 65000,
        "salary_max": 75000,
        "salary_currency": "AUD",
        "job_type": "full_time",
        "is_remote": False,
        "requirements": [
            "Certificate IV in Business Administration or equivalent",
            "Strong written and verbal communication",
        ],
        "benefits": ["Flexible hours", "Salary packaging"],
        "tags": ["admin", "council", "customer service"],
        "categories": ["Administration", "Customer Service"],
        "is_featured": True,
        "is_filled": False,
        "applications_count": 0,
        "created_at": _POSTED,
        "expires_at": _POSTED + timedelta(days=30),
    },
    {
        "id": "sample-2",
        "employer_id": "sample-employer-blacktown-hospital",
        "title": "Registered Nurse",
        "description": (
            "Blacktown Hospital is seeking Registered Nurses for its emergency "
            "department. Provide high quality patient care in a busy, supportive "
            "team with access to ongoing education and clinical development."
        ),
        "company_name": "Blacktown Hospital",
        "company_logo": None,
        "company_website": None,
        "location": "Blacktown",
        "salary_min": 80000,
        "salary_max": 95000,
        "salary_currency": "AUD",
        "job_type": "full_time",
        "is_remote": False,
        "requirements": ["Current AHPRA registration", "Emergency experience preferred"],
        "benefits": ["Penalty rates", "Professional development"],
        "tags": ["nursing", "hospital", "emergency"],
        "categories": ["Healthcare & Medical"],
        "is_featured": False,
        "is_filled": False,
        "applications_count": 0,
        "created_at": _POSTED,
        "expires_at": _POSTED + timedelta(days=30),
    },
    {
        "id": "sample-3",
        "employer_id": "sample-employer-penrith-logistics",
        "title": "Warehouse Team Member",
        "description": (
            "Pick, pack and dispatch orders at our Penrith distribution centre. "
            "Forklift licence an advantage."
        ),
        "company_name": "Penrith Logistics",
        "company_logo": None,
        "company_website": None,
        "location": "Penrith",
        "salary_min": None,
        "salary_max": None,
        "salary_currency": "AUD",
        "job_type": "part_time",
        "is_remote": False,
        "requirements": ["Able to lift 20kg", "Weekend availability"],
        "benefits": [],
        "tags": ["warehouse", "forklift"],
        "categories": ["Transport & Logistics"],
        "is_featured": False,
        "is_filled": False,
        "applications_count": 0,
        "created_at": _POSTED,
        "expires_at": _POSTED + timedelta(days=30),
    },
    {
        "id": "sample-4",
        "employer_id": "sample-employer-liverpool-tech",
        "title": "Junior Web Developer",
        "description": (
            "Build and maintain client websites with a small product team. "
            "Hybrid arrangement with two days a week in our Liverpool office."
        ),
        "company_name": "Liverpool Tech Co",
        "company_logo": None,
        "company_website": None,
        "location": "Liverpool",
        "salary_min": 60000,
        "salary_max": 70000,
        "salary_currency": "AUD",
        "job_type": "contract",
        "is_remote": True,
        "requirements": ["HTML, CSS and JavaScript", "A portfolio of recent work"],
        "benefits": ["Hybrid work"],
        "tags": ["react", "javascript", "web"],
        "categories": ["Information Technology"],
        "is_featured": False,
        "is_filled": False,
        "applications_count": 0,
        "created_at": _POSTED,
        "expires_at": _POSTED + timedelta(days=30),
    },
]
