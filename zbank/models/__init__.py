from .base import Base
from .account import Account, ACCOUNT_STATUSES, ACCOUNT_NUMBER_LENGTH

__all__ = [
    "Base",
    "Account",
    "ACCOUNT_STATUSES",
    "ACCOUNT_NUMBER_LENGTH",
]
