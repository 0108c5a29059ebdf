"""Report model: one anonymous status observation for a location. Immutable once written."""
import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models import Base
from status_core.anti_spam import MAX_NOTE_LENGTH
from status_core.clock import utcnow


class Report(Base):
    """Report table: id, location_id, status, note, created_at, ip_hash."""

    __tablename__ = "report"
    __table_args__ = (Index("ix_report_location_created", "location_id", "created_at"),)

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    location_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("location.id", ondelete="CASCADE"),
        nullable=False,
    )
    # One of the Status literals; kept as a plain string so an unknown value surfaces in the deriver.
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    note: Mapped[str | None] = mapped_column(String(MAX_NOTE_LENGTH), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    # HMAC of the submitter IP (never the IP itself).
    ip_hash: Mapped[str | None] = mapped_column(String(64), nullable=True)

    location: Mapped["Location"] = relationship("Location", back_populates="reports")
