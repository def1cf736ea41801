"""Automation log model."""

import enum

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from matchcast.database import Base
from matchcast.models.base import TimestampMixin


class RunStatus(str, enum.Enum):
    """Automation run status enum."""

    STARTED = "started"
    SUCCESS = "success"
    ERROR = "error"


class AutomationLog(Base, TimestampMixin):
    """Automation log table model (append-only run audit trail)."""

    __tablename__ = "automation_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    function_name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(10), nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    matches_processed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    analyses_generated: Mapped[int | None] = mapped_column(Integer, nullable=True)
    error_details: Mapped[str | None] = mapped_column(Text, nullable=True)
    execution_time_ms: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<AutomationLog(id={self.id}, function_name='{self.function_name}', status={self.status})>"
