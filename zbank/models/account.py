from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy import Column, DateTime, Enum, Integer, String

from .base import Base
from .types import MoneyType

ACCOUNT_STATUSES = ("ACTIVE", "LOCKED", "CLOSED")
ACCOUNT_NUMBER_LENGTH = 10


def _default_now():
    return datetime.now(timezone.utc)


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    account_number = Column(String(ACCOUNT_NUMBER_LENGTH), unique=True, index=True, nullable=False)
    pin_hash = Column(String(255), nullable=False)
    balance = Column(MoneyType(), nullable=False, default=Decimal("0.00"))
    account_holder_name = Column(String(100), nullable=True)
    status = Column(Enum(*ACCOUNT_STATUSES, name="account_status", create_constraint=False), nullable=False, default="ACTIVE")
    created_at = Column(DateTime(timezone=True), default=_default_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_default_now, onupdate=_default_now, nullable=False)
