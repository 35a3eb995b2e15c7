"""Canonical in-memory job board shapes shared by the API and the renderer."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


JobTypeName = Literal["Full-time", "Part-time", "Contract", "Internship"]


class CamelModel(BaseModel):
    """Serialises with camelCase keys, accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Salary(CamelModel):
    """Salary band. Only built when both bounds are known."""

    min: int
    max: int
    currency: str = "AUD"


class Job(CamelModel):
    """Normalized job posting."""

    id: str
    slug: str
    title: str
    company: str
    company_logo: Optional[str] = None
    company_website: Optional[str] = None
    location: str = ""
    type: str = "Full-time"
    remote: bool = False
    salary: Optional[Salary] = None
    description: str = ""
    requirements: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    posted_date: Optional[datetime] = None
    featured: bool = False
    urgent: bool = False
    applications: int = 0
    is_filled: bool = False
    employer_id: str
    company_id: str
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_apply_url: Optional[str] = None


class Company(CamelModel):
    """Company projected from the jobs an employer has posted."""

    id: str
    name: str
    logo: Optional[str] = None
    website: Optional[str] = None
    open_positions: int = 0


class JobCriteria(CamelModel):
    """Search criteria. Unset and blank values impose no constraint."""

    text: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    remote: bool = False
    company_id: Optional[str] = None
    category: Optional[str] = None


DashboardStatus = Literal["all", "active", "filled"]
