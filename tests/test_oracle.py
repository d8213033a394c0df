from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domain.exceptions import OracleError
from app.infrastructure.blockchain.oracle import Web3BalanceOracle

VITALIK_LOWER = "0xd8da6bf26964af9d7eed9e03e53415d37aa96045"
VITALIK_CHECKSUM = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"


@pytest.fixture
def oracle():
    oracle = Web3BalanceOracle("http://localhost:8545")
    oracle.w3 = MagicMock()
    return oracle


class TestNormalizeAddress:
    def test_returns_checksum_form(self, oracle):
        assert oracle.normalize_address(VITALIK_LOWER) == VITALIK_CHECKSUM

    def test_invalid_address_is_oracle_error(self, oracle):
        with pytest.raises(OracleError):
            oracle.normalize_address("0xABCDEF")


@pytest.mark.asyncio
class TestGetBalance:
    async def test_converts_wei_to_ether(self, oracle):
        oracle.w3.eth.get_balance = AsyncMock(return_value=2_500_000_000_000_000_000)

        balance = await oracle.get_balance(VITALIK_CHECKSUM)

        assert balance == Decimal("2.5")
        oracle.w3.eth.get_balance.assert_awaited_once_with(VITALIK_CHECKSUM)

    async def test_zero_balance(self, oracle):
        oracle.w3.eth.get_balance = AsyncMock(return_value=0)

        assert await oracle.get_balance(VITALIK_CHECKSUM) == Decimal(0)

    async def test_provider_failure_is_oracle_error(self, oracle):
        oracle.w3.eth.get_balance = AsyncMock(side_effect=ConnectionError("no route to host"))

        with pytest.raises(OracleError):
            await oracle.get_balance(VITALIK_CHECKSUM)
