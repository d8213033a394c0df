import logging
from decimal import Decimal
from aiohttp import ClientTimeout
from web3 import AsyncWeb3, AsyncHTTPProvider

from app.domain.exceptions import OracleError
from app.domain.interfaces import AbstractBalanceOracle

logger = logging.getLogger(__name__)

class Web3BalanceOracle(AbstractBalanceOracle):
    """Native ether balance of an address over a JSON-RPC endpoint."""

    def __init__(self, rpc_url: str, timeout: float = 20.0):
        self.w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": ClientTimeout(total=timeout)}))

    def normalize_address(self, address: str) -> str:
        try:
            return AsyncWeb3.to_checksum_address(address)
        except ValueError as e:
            raise OracleError(f"Invalid address {address}: {e}") from e

    async def get_balance(self, address: str) -> Decimal:
        try:
            wei = await self.w3.eth.get_balance(address)
        except Exception as e:
            logger.error(f"Balance lookup failed: address={address}, error={e}")
            raise OracleError(f"Balance lookup failed for {address}: {e}") from e
        balance = AsyncWeb3.from_wei(wei, "ether")
        logger.info(f"Fetched balance for {address}: {balance} ETH")
        return Decimal(balance)

    async def close(self) -> None:
        await self.w3.provider.disconnect()
