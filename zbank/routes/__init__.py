from .accounts import accounts_bp

__all__ = ["accounts_bp"]
