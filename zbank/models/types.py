from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator

from zbank.money import to_money


class MoneyType(TypeDecorator):
    """Exact two-digit decimal column.

    SQLite has no decimal storage, so values are kept there as text;
    other dialects use ``NUMERIC(19, 2)``.
    """

    impl = Numeric(19, 2)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(32))
        return dialect.type_descriptor(Numeric(19, 2))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = to_money(value)
        if dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return to_money(Decimal(str(value)))
