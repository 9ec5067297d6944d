from typing import List, Optional
from sqlalchemy import exists, select

from zbank.models import Account


def find_active_account(session, account_number: str) -> Optional[Account]:
    return session.execute(
        select(Account).where(Account.account_number == account_number, Account.status == "ACTIVE")
    ).scalar_one_or_none()


def find_account(session, account_number: str) -> Optional[Account]:
    return session.execute(select(Account).where(Account.account_number == account_number)).scalar_one_or_none()


def account_exists(session, account_number: str) -> bool:
    return session.execute(select(exists().where(Account.account_number == account_number))).scalar()


def list_accounts(session) -> List[Account]:
    return session.execute(select(Account).order_by(Account.id.asc())).scalars().all()


def save_account(session, account: Account) -> Account:
    """Insert ``account`` if new, otherwise write its changes, and commit.

    The session is rolled back and the error re-raised on failure; a
    duplicate account number surfaces as ``IntegrityError``.
    """
    try:
        session.add(account)
        session.commit()
    except Exception:
        session.rollback()
        raise
    session.refresh(account)
    return account
