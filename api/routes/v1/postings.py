"""
Job posting endpoints.

Runs the posting wizard server-side: validate the details, apply the chosen
plan, save the job and, for paid plans, hand back a checkout redirect.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_settings, get_stripe_client, require_identity
from api.schemas.jobs import PlansResponse, PostingRequest, PostingResponse
from api.services import employers as employer_service
from api.services import jobs as job_store
from api.services import orders as order_service
from core.config import Settings
from core.integrations.stripe import (
    PaymentProviderError,
    StripeClient,
    build_products,
    checkout_return_urls,
    get_product_by_id,
)
from core.jobs import Job, normalize_job
from core.jobs.posting import (
    PRICING_PLANS,
    JobForm,
    PostingStep,
    PostingWizard,
    build_job_row,
)
from core.security import Identity
from database.engine import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/postings", tags=["postings"])

FEATURED_PRODUCT_ID = "featured-job-post"
FEATURED_PLAN_ID = "featured"


async def _ensure_employer(db: AsyncSession, identity: Identity, form: JobForm) -> None:
    await employer_service.ensure_employer(
        db,
        user_id=identity.id,
        email=identity.email or form.contact_email,
        company_name=form.company,
        company_logo=form.company_logo,
        phone=form.contact_phone,
    )


@router.get(
    "/plans",
    response_model=PlansResponse,
    summary="List Pricing Plans",
)
async def list_plans():
    return PlansResponse(plans=list(PRICING_PLANS))


@router.post(
    "",
    response_model=PostingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post Job",
    description=(
        "Save a new job under the chosen plan. Paid plans return a checkout URL "
        "and get featured placement only after the order completes."
    ),
)
async def create_posting(
    body: PostingRequest,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
    stripe: StripeClient = Depends(get_stripe_client),
    config: Settings = Depends(get_settings),
):
    """Walk the wizard from details to done (free) or payment (paid)."""
    wizard = PostingWizard()
    wizard.submit_details(body.job)
    wizard.select_plan(body.plan_id)

    await _ensure_employer(db, identity, body.job)
    row = await job_store.create_job(db, build_job_row(body.job, identity.id, wizard.plan))
    job = normalize_job(row)

    response = PostingResponse(
        job=job, step=wizard.step.value, message=wizard.message, plan=wizard.plan
    )
    if wizard.step is not PostingStep.PAYMENT:
        return response

    product = get_product_by_id(build_products(config), FEATURED_PRODUCT_ID)
    try:
        session = await stripe.create_checkout_session(
            price_id=product.price_id,
            mode=product.mode,
            client_reference_id=job.id,
            customer_email=identity.email,
            metadata={"job_id": job.id},
            **checkout_return_urls(config.site_url),
        )
    except PaymentProviderError as e:
        logger.warning(f"Checkout unavailable for job {job.id}: {e}")
        response.message = str(e) or "Failed to create checkout session"
        return response

    response.checkout_url = session.url
    response.checkout_session_id = session.id
    return response


@router.put(
    "/{job_id}",
    response_model=PostingResponse,
    summary="Edit Job",
    description="Owner edit. Saved directly without a plan step.",
)
async def update_posting(
    form: JobForm,
    job_id: str = Path(..., description="Job ID"),
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    wizard = PostingWizard(editing=True)
    wizard.submit_details(form)

    await _ensure_employer(db, identity, form)
    row = await job_store.update_job(
        db, job_id, build_job_row(form, identity.id), employer_id=identity.id
    )
    if row is None:
        raise HTTPException(status_code=404, detail="Job not found")

    return PostingResponse(job=normalize_job(row), step=wizard.step.value, message=wizard.message)


@router.post(
    "/{job_id}/feature",
    response_model=PostingResponse,
    summary="Feature Job",
    description=(
        "Checkout success return. Marks an owned job as featured once a paid "
        "order for that job is on record."
    ),
)
async def feature_posting(
    job_id: str = Path(..., description="Job ID"),
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    row = await job_store.get_job_row(db, job_id, employer_id=identity.id)
    if row is None:
        raise HTTPException(status_code=404, detail="Job not found")

    if not await order_service.has_completed_order(db, identity.id, job_id):
        raise HTTPException(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            detail="No completed payment found for this job",
        )

    wizard = PostingWizard.resume_payment(FEATURED_PLAN_ID)
    wizard.complete_payment()

    await job_store.set_job_flag(db, job_id, "is_featured", True, employer_id=identity.id)
    row["is_featured"] = True
    return PostingResponse(
        job=normalize_job(row), step=wizard.step.value, message=wizard.message, plan=wizard.plan
    )


@router.post(
    "/{job_id}/payment/cancel",
    response_model=PostingResponse,
    summary="Cancel Payment",
    description=(
        "Checkout cancel return. The job stays listed without featured "
        "placement and the plans are offered again."
    ),
)
async def cancel_posting_payment(
    job_id: str = Path(..., description="Job ID"),
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    row = await job_store.get_job_row(db, job_id, employer_id=identity.id)
    if row is None:
        raise HTTPException(status_code=404, detail="Job not found")

    wizard = PostingWizard.resume_payment(FEATURED_PLAN_ID)
    wizard.cancel_payment()
    return PostingResponse(job=normalize_job(row), step=wizard.step.value, message=wizard.message)
