"""
Job posting wizard.

A posting moves through ``details -> pricing -> payment -> done``. The free
plan skips the payment step; editing an existing job saves straight from the
details step.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from core.jobs.catalog import JobCategory, MAX_CATEGORIES
from core.jobs.normalizer import to_store_job_type


# ==================== Pricing ===================== #
class PricingPlan(BaseModel):
    """A posting plan offered at the pricing step."""

    id: str
    name: str
    description: str
    price: float
    currency: str = "AUD"
    duration_days: int = 30
    features: list[str] = Field(default_factory=list)
    featured: bool = False


PRICING_PLANS: tuple[PricingPlan, ...] = (
    PricingPlan(
        id="basic",
        name="Basic Job Post",
        description="Free listing for 30 days",
        price=0,
        features=[
            "Listed for 30 days",
            "Appears in search and browse pages",
            "Manage from your employer dashboard",
        ],
    ),
    PricingPlan(
        id="featured",
        name="Featured Job Post",
        description="Featured job posting for 30 days",
        price=9.99,
        features=[
            "Everything in Basic",
            "Shown above standard listings",
            "Featured badge on the job card",
        ],
        featured=True,
    ),
)


def get_plan(plan_id: str) -> Optional[PricingPlan]:
    """Look up a pricing plan by id."""
    for plan in PRICING_PLANS:
        if plan.id == plan_id:
            return plan
    return None


# ==================== Form ===================== #
class JobForm(BaseModel):
    """Posting form. Validation failures block the save entirely."""

    title: str = Field(..., max_length=200)
    company: str = Field(..., max_length=200)
    location: str = Field(..., max_length=120)
    description: str
    type: Literal["Full-time", "Part-time", "Contract", "Internship"] = "Full-time"
    remote: bool = False
    categories: list[JobCategory] = Field(..., min_length=1, max_length=MAX_CATEGORIES)
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    currency: str = Field("AUD", min_length=3, max_length=3)
    company_logo: Optional[str] = None
    company_website: Optional[str] = None
    requirements: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=40)
    contact_apply_url: Optional[str] = None

    @field_validator("title", "company", "location", "description", mode="before")
    @classmethod
    def require_text(cls, v: Any) -> Any:
        """Reject blank required fields."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("This field is required")
        return v

    @field_validator("requirements", "benefits", mode="before")
    @classmethod
    def split_lines(cls, v: Any) -> Any:
        """Accept one entry per line."""
        if isinstance(v, str):
            return [line.strip() for line in v.split("\n") if line.strip()]
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: Any) -> Any:
        """Accept comma separated tags."""
        if isinstance(v, str):
            return [tag.strip() for tag in v.split(",") if tag.strip()]
        return v

    @field_validator(
        "company_logo", "company_website", "contact_email", "contact_phone",
        "contact_apply_url", mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Empty optional inputs are stored as null."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()


def build_job_row(
    form: JobForm,
    employer_id: str,
    plan: Optional[PricingPlan] = None,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """
    Convert a validated form into a ``jobs`` row.

    Without a plan (editing) the lifecycle columns are left out so an update
    does not touch them.
    """
    row: dict[str, Any] = {
        "employer_id": employer_id,
        "title": form.title,
        "description": form.description,
        "company_name": form.company,
        "company_logo": form.company_logo,
        "company_website": form.company_website,
        "location": form.location,
        "salary_min": form.salary_min,
        "salary_max": form.salary_max,
        "salary_currency": form.currency,
        "job_type": to_store_job_type(form.type),
        "is_remote": form.remote,
        "contact_email": form.contact_email,
        "contact_phone": form.contact_phone,
        "apply_url": form.contact_apply_url,
        "requirements": list(form.requirements),
        "benefits": list(form.benefits),
        "tags": list(form.tags),
        "categories": list(form.categories),
    }
    if plan is not None:
        now = now or datetime.now(timezone.utc)
        # placement is granted once the plan's order completes
        row["is_featured"] = False
        row["is_filled"] = False
        row["expires_at"] = now + timedelta(days=plan.duration_days)
    return row


# ==================== Wizard ===================== #
class PostingStep(str, Enum):
    """Steps of the posting wizard."""

    DETAILS = "details"
    PRICING = "pricing"
    PAYMENT = "payment"
    DONE = "done"


class WizardError(Exception):
    """Raised for a transition the current step does not allow."""


PAYMENT_CANCELED_MESSAGE = "Payment was canceled. You can choose the free option or try again."
FREE_POSTED_MESSAGE = (
    "Free job posted successfully! Consider upgrading to Featured for better visibility."
)
FEATURED_POSTED_MESSAGE = "Featured job posted successfully!"
UPDATED_MESSAGE = "Job updated successfully!"


class PostingWizard:
    """
    State machine behind the posting flow.

    Example:
        wizard = PostingWizard()
        wizard.submit_details(form)
        wizard.select_plan("featured")
        assert wizard.step is PostingStep.PAYMENT
    """

    def __init__(self, editing: bool = False):
        self.editing = editing
        self.step = PostingStep.DETAILS
        self.form: Optional[JobForm] = None
        self.plan: Optional[PricingPlan] = None
        self.message: Optional[str] = None

    def submit_details(self, form: JobForm) -> PostingStep:
        """Accept the validated details. Edits are saved without a plan."""
        if self.step is not PostingStep.DETAILS:
            raise WizardError(f"Cannot submit details at step {self.step.value}")
        self.form = form
        self.message = None
        if self.editing:
            self.step = PostingStep.DONE
            self.message = UPDATED_MESSAGE
        else:
            self.step = PostingStep.PRICING
        return self.step

    def select_plan(self, plan_id: str) -> PostingStep:
        """Choose a plan; the free plan finishes the wizard."""
        if self.step is not PostingStep.PRICING:
            raise WizardError(f"Cannot select a plan at step {self.step.value}")
        plan = get_plan(plan_id)
        if plan is None:
            raise WizardError(f"Unknown pricing plan: {plan_id}")
        self.plan = plan
        if plan.price == 0:
            self.step = PostingStep.DONE
            self.message = FREE_POSTED_MESSAGE
        else:
            self.step = PostingStep.PAYMENT
        return self.step

    def complete_payment(self) -> PostingStep:
        """Provider reported a successful checkout."""
        if self.step is not PostingStep.PAYMENT:
            raise WizardError(f"No payment in progress at step {self.step.value}")
        self.step = PostingStep.DONE
        self.message = FEATURED_POSTED_MESSAGE
        return self.step

    def cancel_payment(self) -> PostingStep:
        """Provider returned with ``canceled=true``; offer the plans again."""
        if self.step is not PostingStep.PAYMENT:
            raise WizardError(f"No payment in progress at step {self.step.value}")
        self.step = PostingStep.PRICING
        self.message = PAYMENT_CANCELED_MESSAGE
        return self.step

    @classmethod
    def resume_payment(cls, plan_id: str) -> "PostingWizard":
        """Rebuild the wizard at the payment step for an employer back from checkout."""
        wizard = cls()
        wizard.step = PostingStep.PRICING
        wizard.select_plan(plan_id)
        if wizard.step is not PostingStep.PAYMENT:
            raise WizardError(f"Plan {plan_id} has no payment step")
        return wizard
