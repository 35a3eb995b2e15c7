"""Payment orders written back by the payment provider's webhook."""

from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, BigInteger, DateTime, func
from database.engine import Base


class OrderStatus(str, PyEnum):
    """Order state."""

    PENDING = "pending"
    COMPLETED = "completed"
    CANCELED = "canceled"


class StripeOrder(Base):
    """
    Completed checkout as recorded after the provider redirects back.
    Amounts are in the currency's minor unit (cents).
    """

    __tablename__ = "stripe_orders"

    id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, nullable=False, autoincrement=True
    )
    checkout_session_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    payment_intent_id: Mapped[str | None] = mapped_column(String(255))
    customer_id: Mapped[str | None] = mapped_column(String(255))
    employer_id: Mapped[str | None] = mapped_column(String(36), index=True)
    job_id: Mapped[str | None] = mapped_column(String(36))

    amount_subtotal: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    amount_total: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="aud")
    payment_status: Mapped[str] = mapped_column(String(30), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=OrderStatus.PENDING.value
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
