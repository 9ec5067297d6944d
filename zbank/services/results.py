"""
Result types returned by the account service.

Business failures come back as one of the ``AccountError`` variants on a
``ServiceResult`` instead of being raised; callers branch on ``result.ok``.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from zbank.money import to_money


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes; stored values are always UTC.
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class AccountError(str, Enum):
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INVALID_PIN = "INVALID_PIN"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    DUPLICATE_ACCOUNT = "DUPLICATE_ACCOUNT"


@dataclass(frozen=True)
class AccountSnapshot:
    """Read-only projection of an account. Never carries the PIN hash."""

    id: int
    account_number: str
    balance: Decimal
    account_holder_name: Optional[str]
    status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_model(cls, account) -> "AccountSnapshot":
        return cls(
            id=account.id,
            account_number=account.account_number,
            balance=to_money(account.balance),
            account_holder_name=account.account_holder_name,
            status=account.status,
            created_at=_as_utc(account.created_at),
            updated_at=_as_utc(account.updated_at),
        )


@dataclass(frozen=True)
class ServiceResult:
    value: Any = None
    error: Optional[AccountError] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "ServiceResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AccountError, message: str) -> "ServiceResult":
        return cls(error=error, message=message)
