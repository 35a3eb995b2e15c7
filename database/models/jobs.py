"""
Jobs Module

Job postings as stored by the record store. Rows are read back as plain
mappings and normalized in ``core.jobs.normalizer``.
"""

import uuid
from datetime import datetime
from enum import Enum as PyEnum
from typing import Any

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import (
    String,
    Boolean,
    Integer,
    DateTime,
    func,
    Text,
    JSON,
    Index,
)
from database.engine import Base


# ==================== Job Enums ===================== #
class JobType(str, PyEnum):
    """Job employment type as stored."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


def new_id() -> str:
    return str(uuid.uuid4())


# ==================== Job Model ===================== #
class JobPosting(Base):
    """
    Job posting owned by an employer account.
    Deleted rows are gone for good; there is no soft delete.
    """

    __tablename__ = "jobs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)

    # Owner (auth provider user id, same value as employers.id)
    employer_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    # Basic info
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company_logo: Mapped[str | None] = mapped_column(String(1000))
    company_website: Mapped[str | None] = mapped_column(String(500))
    location: Mapped[str] = mapped_column(String(120), nullable=False, index=True)

    # Compensation
    salary_min: Mapped[int | None] = mapped_column(Integer)
    salary_max: Mapped[int | None] = mapped_column(Integer)
    salary_currency: Mapped[str | None] = mapped_column(String(3), default="AUD")

    # Classification
    job_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=JobType.FULL_TIME.value
    )
    is_remote: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Content
    requirements: Mapped[list[str] | None] = mapped_column(JSON)
    benefits: Mapped[list[str] | None] = mapped_column(JSON)
    tags: Mapped[list[str] | None] = mapped_column(JSON)
    categories: Mapped[list[str] | None] = mapped_column(JSON)

    # Contact
    contact_email: Mapped[str | None] = mapped_column(String(255))
    contact_phone: Mapped[str | None] = mapped_column(String(40))
    apply_url: Mapped[str | None] = mapped_column(String(1000))

    # Status
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_filled: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False, index=True
    )
    applications_count: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False
    )  # Incremented on every detail view

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    __table_args__ = (
        Index("idx_jobs_open", "is_filled", "expires_at"),
        Index("idx_jobs_employer_created", "employer_id", "created_at"),
    )

    def to_row(self) -> dict[str, Any]:
        """Column values keyed by column name."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }
