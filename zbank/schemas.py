"""
Request validation and response serialization for the accounts API.

Validators take the decoded JSON body and either return a plain dict of
checked, typed values or raise ``ValueError`` with a message suitable for
the client. Serializers turn service snapshots into camelCase JSON.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from zbank.models import ACCOUNT_NUMBER_LENGTH
from zbank.money import MAX_AMOUNT, CENT, format_money, has_at_most_two_places, to_money
from zbank.services.results import AccountSnapshot

PIN_MIN_LENGTH = 4
PIN_MAX_LENGTH = 10
HOLDER_NAME_MAX_LENGTH = 100


def _ts(val: Optional[datetime]) -> Optional[str]:
    return val.isoformat() if val else None


def account_to_dict(snapshot: AccountSnapshot) -> Dict[str, Any]:
    return {
        "id": snapshot.id,
        "accountNumber": snapshot.account_number,
        "balance": format_money(snapshot.balance),
        "accountHolderName": snapshot.account_holder_name,
        "status": snapshot.status,
        "createdAt": _ts(snapshot.created_at),
        "updatedAt": _ts(snapshot.updated_at),
    }


def _require_object(payload) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def validate_account_number(value) -> str:
    if value is None:
        raise ValueError("Account number is required")
    if not isinstance(value, str) or len(value) != ACCOUNT_NUMBER_LENGTH:
        raise ValueError(f"Account number must be exactly {ACCOUNT_NUMBER_LENGTH} characters")
    return value


def validate_pin(value) -> str:
    if value is None:
        raise ValueError("PIN is required")
    if not isinstance(value, str) or not PIN_MIN_LENGTH <= len(value) <= PIN_MAX_LENGTH:
        raise ValueError(f"PIN must be between {PIN_MIN_LENGTH} and {PIN_MAX_LENGTH} characters")
    return value


def _parse_decimal(value, field: str) -> Decimal:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{field} must be a number")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"{field} must be a number")
    if not amount.is_finite():
        raise ValueError(f"{field} must be a finite number")
    if abs(amount) > MAX_AMOUNT:
        raise ValueError(f"{field} is too large")
    if not has_at_most_two_places(amount):
        raise ValueError(f"{field} must have at most 2 decimal places")
    return to_money(amount)


def validate_amount(value) -> Decimal:
    if value is None:
        raise ValueError("Amount is required")
    amount = _parse_decimal(value, "Amount")
    if amount < CENT:
        raise ValueError("Amount must be greater than 0")
    return amount


def validate_opening_balance(value) -> Optional[Decimal]:
    if value is None:
        return None
    balance = _parse_decimal(value, "Balance")
    if balance < 0:
        raise ValueError("Balance cannot be negative")
    return balance


def parse_credentials(payload) -> Dict[str, Any]:
    payload = _require_object(payload)
    return {
        "account_number": validate_account_number(payload.get("accountNumber")),
        "pin": validate_pin(payload.get("pin")),
    }


def parse_transaction_request(payload) -> Dict[str, Any]:
    payload = _require_object(payload)
    return {
        "account_number": validate_account_number(payload.get("accountNumber")),
        "pin": validate_pin(payload.get("pin")),
        "amount": validate_amount(payload.get("amount")),
    }


def parse_create_account_request(payload) -> Dict[str, Any]:
    payload = _require_object(payload)
    holder_name = payload.get("accountHolderName")
    if holder_name is not None:
        if not isinstance(holder_name, str):
            raise ValueError("Account holder name must be a string")
        if len(holder_name) > HOLDER_NAME_MAX_LENGTH:
            raise ValueError(f"Account holder name must be at most {HOLDER_NAME_MAX_LENGTH} characters")
    return {
        "account_number": validate_account_number(payload.get("accountNumber")),
        "pin": validate_pin(payload.get("pin")),
        "balance": validate_opening_balance(payload.get("balance")),
        "account_holder_name": holder_name,
    }
