from decimal import Decimal
from typing import Optional
from sqlalchemy import Numeric, String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

class ExactDecimal(TypeDecorator):
    """
    Numeric column that keeps every digit of a Decimal.

    SQLite has no decimal type and would round through float, so there the
    value is stored as plain decimal text.
    """
    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 38, scale: int = 18):
        super().__init__(precision=precision, scale=scale)
        self.precision = precision
        self.scale = scale

    def load_dialect_impl(self, dialect: Dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String())
        return dialect.type_descriptor(Numeric(self.precision, self.scale, asdecimal=True))

    def process_bind_param(self, value: Optional[Decimal], dialect: Dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return format(Decimal(value), "f")

    def process_result_value(self, value, dialect: Dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return Decimal(value) if isinstance(value, str) else value
