import logging
from decimal import Decimal
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError

from zbank.models import Account
from zbank.money import MAX_AMOUNT, ZERO, to_money
from zbank.security import hash_pin, verify_pin
from zbank.services.results import AccountError, AccountSnapshot, ServiceResult
from zbank.store import accounts as store

logger = logging.getLogger(__name__)


def _not_found(account_number: str) -> ServiceResult:
    return ServiceResult.failure(AccountError.ACCOUNT_NOT_FOUND, f"Account not found: {account_number}")


def _authorize(session, account_number: str, pin: str) -> Tuple[Optional[Account], Optional[ServiceResult]]:
    account = store.find_active_account(session, account_number)
    if account is None:
        return None, _not_found(account_number)
    if not verify_pin(pin, account.pin_hash):
        logger.warning("Invalid PIN attempt for account %s", account_number)
        return None, ServiceResult.failure(AccountError.INVALID_PIN, "Invalid PIN")
    return account, None


def _require_positive(amount: Decimal) -> Optional[ServiceResult]:
    if amount is None or amount <= 0:
        return ServiceResult.failure(AccountError.VALIDATION_FAILED, "Amount must be greater than 0")
    return None


def authenticate(session, account_number: str, pin: str) -> ServiceResult:
    logger.info("Authenticating account %s", account_number)
    account, failure = _authorize(session, account_number, pin)
    if failure:
        return failure
    return ServiceResult.success(AccountSnapshot.from_model(account))


def get_balance(session, account_number: str) -> ServiceResult:
    logger.info("Balance inquiry for account %s", account_number)
    account = store.find_active_account(session, account_number)
    if account is None:
        return _not_found(account_number)
    return ServiceResult.success(AccountSnapshot.from_model(account))


def deposit(session, account_number: str, pin: str, amount: Decimal) -> ServiceResult:
    logger.info("Processing deposit for account %s, amount %s", account_number, amount)
    invalid = _require_positive(amount)
    if invalid:
        return invalid
    account, failure = _authorize(session, account_number, pin)
    if failure:
        return failure

    new_balance = to_money(account.balance) + to_money(amount)
    if new_balance > MAX_AMOUNT:
        return ServiceResult.failure(AccountError.VALIDATION_FAILED, "Deposit would exceed the maximum balance")

    account.balance = new_balance
    store.save_account(session, account)
    logger.info("Deposit successful for account %s. New balance: %s", account_number, account.balance)
    return ServiceResult.success(AccountSnapshot.from_model(account))


def withdraw(session, account_number: str, pin: str, amount: Decimal) -> ServiceResult:
    logger.info("Processing withdrawal for account %s, amount %s", account_number, amount)
    invalid = _require_positive(amount)
    if invalid:
        return invalid
    account, failure = _authorize(session, account_number, pin)
    if failure:
        return failure

    balance = to_money(account.balance)
    amount = to_money(amount)
    if balance < amount:
        logger.warning(
            "Insufficient funds for account %s. Balance: %s, requested: %s", account_number, balance, amount
        )
        return ServiceResult.failure(AccountError.INSUFFICIENT_FUNDS, "Insufficient funds")

    account.balance = balance - amount
    store.save_account(session, account)
    logger.info("Withdrawal successful for account %s. New balance: %s", account_number, account.balance)
    return ServiceResult.success(AccountSnapshot.from_model(account))


def list_accounts(session) -> ServiceResult:
    logger.info("Retrieving all accounts")
    return ServiceResult.success([AccountSnapshot.from_model(account) for account in store.list_accounts(session)])


def create_account(session, data: dict) -> ServiceResult:
    """Create an ACTIVE account from validated request data.

    ``data`` holds ``account_number``, ``pin`` and optionally ``balance`` and
    ``account_holder_name``.
    """
    account_number = data["account_number"]
    logger.info("Creating new account %s", account_number)
    if store.account_exists(session, account_number):
        logger.warning("Account already exists: %s", account_number)
        return ServiceResult.failure(AccountError.DUPLICATE_ACCOUNT, f"Account already exists: {account_number}")

    balance = data.get("balance")
    account = Account(
        account_number=account_number,
        pin_hash=hash_pin(data["pin"]),
        balance=to_money(balance) if balance is not None else ZERO,
        account_holder_name=data.get("account_holder_name"),
        status="ACTIVE",
    )
    try:
        store.save_account(session, account)
    except IntegrityError:
        logger.warning("Account already exists: %s", account_number)
        return ServiceResult.failure(AccountError.DUPLICATE_ACCOUNT, f"Account already exists: {account_number}")
    return ServiceResult.success(AccountSnapshot.from_model(account))
