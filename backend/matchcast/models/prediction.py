"""Prediction model."""

import uuid
from datetime import date, datetime

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from matchcast.database import Base
from matchcast.models.base import TimestampMixin, UTCDateTime, utcnow


def new_prediction_id() -> str:
    return str(uuid.uuid4())


class Prediction(Base, TimestampMixin):
    """Prediction table model (one row per match and generation)."""

    __tablename__ = "predictions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_prediction_id)
    match_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    external_event_id: Mapped[str | None] = mapped_column(
        String(50), nullable=True, unique=True
    )

    # Fixture
    league_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    home_team: Mapped[str | None] = mapped_column(String(100), nullable=True)
    away_team: Mapped[str | None] = mapped_column(String(100), nullable=True)
    match_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Generated output
    prediction: Mapped[str] = mapped_column(String(200), nullable=False)
    confidence_score: Mapped[int] = mapped_column(Integer, nullable=False)  # 0-100
    win_probability: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 0-100
    score_prediction: Mapped[str | None] = mapped_column(String(50), nullable=True)
    reasoning: Mapped[str | None] = mapped_column(Text, nullable=True)
    analysis: Mapped[str | None] = mapped_column(Text, nullable=True)
    model_name: Mapped[str] = mapped_column(String(100), nullable=False)

    last_updated: Mapped[datetime] = mapped_column(
        UTCDateTime, default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Prediction(id={self.id}, match_name='{self.match_name}')>"
