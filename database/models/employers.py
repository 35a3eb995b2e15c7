"""Employer accounts and admin flags."""

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Boolean, DateTime, func
from database.engine import Base


class Employer(Base):
    """
    Employer profile, created the first time an account posts a job.
    The id is the auth provider's user id.
    """

    __tablename__ = "employers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    email: Mapped[str | None] = mapped_column(String(255), index=True)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company_logo: Mapped[str | None] = mapped_column(String(1000))
    contact_person: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(40))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


class AdminUser(Base):
    """Accounts allowed into the admin panel."""

    __tablename__ = "admin_users"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    is_super_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
