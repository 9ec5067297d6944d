import logging
from decimal import Decimal

from sqlalchemy import func, select

from zbank.models import Account
from zbank.security import hash_pin

logger = logging.getLogger(__name__)

SAMPLE_ACCOUNTS = (
    ("1234567890", "1234", Decimal("1000.00"), "John Doe"),
    ("9876543210", "5678", Decimal("5000.50"), "Jane Smith"),
    ("5555555555", "0000", Decimal("250.75"), "Bob Johnson"),
)


def seed_sample_accounts(session, environment: str) -> int:
    """Insert the sample accounts into an empty table outside production.

    Returns the number of accounts created.
    """
    if environment == "production":
        logger.info("Skipping sample data in %s", environment)
        return 0

    try:
        existing = session.execute(select(func.count()).select_from(Account)).scalar()
        if existing:
            return 0
        session.add_all(
            [
                Account(
                    account_number=number,
                    pin_hash=hash_pin(pin),
                    balance=balance,
                    account_holder_name=holder,
                    status="ACTIVE",
                )
                for number, pin, balance, holder in SAMPLE_ACCOUNTS
            ]
        )
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info("Sample data initialized. %d accounts created", len(SAMPLE_ACCOUNTS))
    return len(SAMPLE_ACCOUNTS)
