"""Checkout and order endpoints for paid job posts."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_settings, get_stripe_client, require_identity
from api.schemas.common import ListResponse, list_response
from api.schemas.jobs import (
    CheckoutRequest,
    CheckoutResponse,
    OrderResponse,
    ProductResponse,
)
from api.services import orders as order_service
from core.config import Settings
from core.integrations.stripe import (
    StripeClient,
    build_products,
    checkout_return_urls,
    get_product_by_id,
)
from core.security import Identity
from database.engine import get_db

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get(
    "/products",
    response_model=ListResponse[ProductResponse],
    summary="List Products",
)
async def list_products(config: Settings = Depends(get_settings)):
    products = [ProductResponse(**asdict(p)) for p in build_products(config)]
    return list_response(products)


@router.post(
    "/checkout",
    response_model=CheckoutResponse,
    summary="Create Checkout Session",
    description="Start a hosted checkout and return the redirect URL.",
)
async def create_checkout(
    body: CheckoutRequest,
    identity: Identity = Depends(require_identity),
    stripe: StripeClient = Depends(get_stripe_client),
    config: Settings = Depends(get_settings),
):
    product = get_product_by_id(build_products(config), body.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")

    metadata = {"job_id": body.job_id} if body.job_id else None
    session = await stripe.create_checkout_session(
        price_id=product.price_id,
        mode=product.mode,
        client_reference_id=body.job_id or identity.id,
        customer_email=identity.email,
        metadata=metadata,
        **checkout_return_urls(config.site_url),
    )
    return CheckoutResponse(session_id=session.id, url=session.url)


@router.get(
    "/orders/latest",
    response_model=OrderResponse,
    summary="Latest Order",
    description="Most recent order of the signed-in account, for the success page.",
)
async def get_latest_order(
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    order = await order_service.latest_order(db, identity.id)
    if order is None:
        raise HTTPException(status_code=404, detail="No orders found")
    return order
