"""
Node and contract latency benchmarks.

Each routine runs its steps strictly in sequence, times the whole run with
time.perf_counter, and raises the BenchmarkError subclass naming the first
step that failed. Collaborators (connect, wallet_factory, contract_factory)
are injectable so the routines can be driven by mock providers.
"""
import logging
from typing import Any, Callable, Optional

from adapters.contract_spark_market import SparkMarketContract
from adapters.provider_fuel_graphql import FuelGraphQLProvider
from adapters.wallet_mnemonic import derivation_path, wallet_from_mnemonic
from config import ACCOUNT_INDEX, TX_PAGE_SIZE
from core.errors import (
    BlockHeightFetchError,
    ContractInteractionError,
    GasPriceFetchError,
    ProviderConnectionError,
    TransactionFetchError,
    WalletCreationError,
)
from core.interfaces import MarketContract, NodeProvider, Wallet
from core.types import PageDirection, PaginationRequest, TimingMeasurement

logger = logging.getLogger(__name__)

ConnectFn = Callable[[str], NodeProvider]
WalletFactory = Callable[[str, NodeProvider, str], Wallet]
ContractFactory = Callable[[str, Wallet], MarketContract]


def latest_transactions_request() -> PaginationRequest:
    """Most recent TX_PAGE_SIZE transactions, newest first."""
    return PaginationRequest(cursor=None, results=TX_PAGE_SIZE, direction=PageDirection.BACKWARD)


def format_duration(seconds: float) -> str:
    """Human duration with 2 decimals in the largest fitting unit: 1.23s, 523.45ms, 12.00µs."""
    if seconds >= 1.0:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds * 1e6:.2f}µs"


def _release(provider: Optional[Any]) -> None:
    close = getattr(provider, "close", None)
    if callable(close):
        try:
            close()
        except Exception as e:
            logger.debug("Provider close failed: %s", e)


def benchmark_node(url: str, connect: ConnectFn = FuelGraphQLProvider.connect) -> float:
    """
    Connect to `url`, then query block height, gas price and the latest
    transactions. Returns elapsed seconds from entry to just before return.
    """
    timer = TimingMeasurement()
    provider = None
    try:
        logger.info("Connecting to node %r", url)
        try:
            provider = connect(url)
        except Exception as e:
            raise ProviderConnectionError(str(e)) from e
        logger.info("Connected")

        logger.info("Trying to get last block height...")
        try:
            height = provider.latest_block_height()
        except Exception as e:
            raise BlockHeightFetchError(str(e)) from e
        logger.info("Block height: %s", height)

        logger.info("Trying to get latest gas price...")
        try:
            gas_price = provider.latest_gas_price()
        except Exception as e:
            raise GasPriceFetchError(str(e)) from e
        logger.info("Latest gas price: %s", gas_price)

        logger.info("Trying to fetch the latest transaction...")
        try:
            page = provider.get_transactions(latest_transactions_request())
        except Exception as e:
            raise TransactionFetchError(str(e)) from e

        if page.results:
            logger.info("Latest transaction: %s", page.results[0].status)
        else:
            logger.info("No transactions found in the latest block.")

        return timer.stop()
    finally:
        _release(provider)


def benchmark_contract(
    url: str,
    mnemonic: str,
    contract_id: str,
    connect: ConnectFn = FuelGraphQLProvider.connect,
    wallet_factory: WalletFactory = wallet_from_mnemonic,
    contract_factory: ContractFactory = SparkMarketContract,
) -> float:
    """
    Connect, derive the wallet at m/44'/1179993420'/0'/0/0, bind the market
    contract and call matcher_fee(). Returns elapsed seconds.

    A malformed contract_id is reported as ContractInteractionError.
    """
    timer = TimingMeasurement()
    provider = None
    try:
        try:
            provider = connect(url)
        except Exception as e:
            raise ProviderConnectionError(str(e)) from e

        try:
            wallet = wallet_factory(mnemonic, provider, derivation_path(ACCOUNT_INDEX))
        except Exception as e:
            raise WalletCreationError(str(e)) from e

        try:
            market = contract_factory(contract_id, wallet)
            market.matcher_fee()
        except Exception as e:
            raise ContractInteractionError(str(e)) from e

        return timer.stop()
    finally:
        _release(provider)
