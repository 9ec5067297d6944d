from .accounts import (
    find_active_account,
    find_account,
    account_exists,
    list_accounts,
    save_account,
)

__all__ = [
    "find_active_account",
    "find_account",
    "account_exists",
    "list_accounts",
    "save_account",
]
