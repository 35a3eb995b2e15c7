"""Request and response schemas for the job board endpoints."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from core.jobs.models import Job
from core.jobs.normalizer import to_store_job_type
from core.jobs.posting import JobForm, PricingPlan


# ==================== Postings ===================== #
class PostingRequest(BaseModel):
    """Details step plus the plan chosen at the pricing step."""

    job: JobForm
    plan_id: str = Field("basic", description="Pricing plan id (basic or featured)")


class PostingResponse(BaseModel):
    """Outcome of a posting submission."""

    job: Job
    step: str = Field(description="Wizard step reached (done, payment or pricing)")
    message: Optional[str] = None
    plan: Optional[PricingPlan] = None
    checkout_url: Optional[str] = Field(
        None, description="Provider redirect for paid plans"
    )
    checkout_session_id: Optional[str] = None


class PlansResponse(BaseModel):
    plans: list[PricingPlan]


# ==================== Mutations ===================== #
class FlagUpdate(BaseModel):
    """Body for the filled/featured toggles."""

    value: bool


class AdminJobUpdate(BaseModel):
    """
    Partial edit from the admin panel. Only fields sent are changed;
    categories and ownership are not editable here.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    company: Optional[str] = Field(None, min_length=1, max_length=200)
    location: Optional[str] = Field(None, min_length=1, max_length=120)
    description: Optional[str] = Field(None, min_length=1)
    requirements: Optional[list[str]] = None
    benefits: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: Optional[str] = Field(None, min_length=3, max_length=3)
    remote: Optional[bool] = None
    type: Optional[Literal["Full-time", "Part-time", "Contract", "Internship"]] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=40)
    contact_apply_url: Optional[str] = None

    @field_validator("requirements", "benefits", mode="before")
    @classmethod
    def split_lines(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [line.strip() for line in v.split("\n") if line.strip()]
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [tag.strip() for tag in v.split(",") if tag.strip()]
        return v

    @field_validator("contact_email", "contact_phone", "contact_apply_url", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_row(self) -> dict[str, Any]:
        """Store column values for the fields that were sent."""
        columns = {
            "company": "company_name",
            "remote": "is_remote",
            "type": "job_type",
            "contact_apply_url": "apply_url",
        }
        row = {}
        for field, value in self.model_dump(exclude_unset=True).items():
            if field == "type" and value is not None:
                value = to_store_job_type(value)
            if field == "salary_currency" and value is not None:
                value = value.upper()
            row[columns.get(field, field)] = value
        return row


# ==================== Payments ===================== #
class CheckoutRequest(BaseModel):
    product_id: str = Field("featured-job-post", description="Catalogue product id")
    job_id: Optional[str] = Field(None, description="Job the purchase is for")


class CheckoutResponse(BaseModel):
    session_id: str
    url: str


class ProductResponse(BaseModel):
    id: str
    price_id: str
    name: str
    description: str
    price: float
    currency: str
    mode: str


class OrderResponse(BaseModel):
    order_id: int
    checkout_session_id: str
    payment_intent_id: Optional[str] = None
    job_id: Optional[str] = None
    amount_subtotal: int
    amount_total: int
    currency: str
    amount_display: str
    payment_status: str
    order_status: str
    order_date: Optional[str] = None
    order_date_display: Optional[str] = None


class EmployerResponse(BaseModel):
    id: str
    email: Optional[str] = None
    company_name: str
    company_logo: Optional[str] = None
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[str] = None
