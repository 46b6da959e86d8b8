from __future__ import annotations
import uuid
from datetime import datetime, time
from typing import Optional
from sqlalchemy import String, Integer, Time, DateTime, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class Doctor(Base):
    __tablename__ = "doctors"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    clinic_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("clinics.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    specialty: Mapped[str] = mapped_column(String(64), nullable=False)
    avatar_image_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    appointment_price_in_cents: Mapped[int] = mapped_column(Integer, nullable=False)

    # 0=Sunday .. 6=Saturday
    available_from_weekday: Mapped[int] = mapped_column(Integer, nullable=False)
    available_to_weekday: Mapped[int] = mapped_column(Integer, nullable=False)
    available_from_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    available_to_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    # relationships
    clinic = relationship("Clinic", back_populates="doctors")
