from decimal import Decimal

from sqlalchemy.dialects import postgresql, sqlite

from app.infrastructure.database.types import ExactDecimal


def test_sqlite_stores_plain_decimal_text():
    column_type = ExactDecimal(38, 18)
    dialect = sqlite.dialect()

    assert column_type.process_bind_param(Decimal("1E-18"), dialect) == "0.000000000000000001"
    assert column_type.process_result_value("0.000000000000000001", dialect) == Decimal("1E-18")


def test_other_backends_keep_numeric():
    column_type = ExactDecimal(38, 18)
    dialect = postgresql.dialect()

    impl = column_type.load_dialect_impl(dialect)

    assert impl.precision == 38
    assert impl.scale == 18
    assert column_type.process_bind_param(Decimal("2.5"), dialect) == Decimal("2.5")


def test_null_passes_through():
    column_type = ExactDecimal()

    assert column_type.process_bind_param(None, sqlite.dialect()) is None
    assert column_type.process_result_value(None, sqlite.dialect()) is None
