"""Payment order lookups."""

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.utils.formatting import format_order_amount, format_order_date
from database.models.orders import OrderStatus, StripeOrder


def _order_to_dict(order: StripeOrder) -> Dict[str, Any]:
    return {
        "order_id": order.id,
        "checkout_session_id": order.checkout_session_id,
        "payment_intent_id": order.payment_intent_id,
        "job_id": order.job_id,
        "amount_subtotal": order.amount_subtotal,
        "amount_total": order.amount_total,
        "currency": order.currency,
        "amount_display": format_order_amount(order.amount_total, order.currency),
        "payment_status": order.payment_status,
        "order_status": order.status,
        "order_date": order.created_at.isoformat() if order.created_at else None,
        "order_date_display": format_order_date(order.created_at) if order.created_at else None,
    }


async def latest_order(session: AsyncSession, employer_id: str) -> Optional[Dict[str, Any]]:
    """Most recent order placed by an account, if any."""
    result = await session.execute(
        select(StripeOrder)
        .where(StripeOrder.employer_id == employer_id)
        .order_by(StripeOrder.created_at.desc())
        .limit(1)
    )
    order = result.scalar_one_or_none()
    return _order_to_dict(order) if order else None


async def has_completed_order(session: AsyncSession, employer_id: str, job_id: str) -> bool:
    """True when the account has a completed, paid order for this job."""
    result = await session.execute(
        select(StripeOrder.id)
        .where(StripeOrder.employer_id == employer_id)
        .where(StripeOrder.job_id == job_id)
        .where(StripeOrder.status == OrderStatus.COMPLETED.value)
        .where(StripeOrder.payment_status == "paid")
        .limit(1)
    )
    return result.scalar_one_or_none() is not None
