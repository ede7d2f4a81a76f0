from __future__ import annotations

"""
Error taxonomy for benchmark routines: one class per failing step.

Each carries the underlying cause as a string; str(err) prefixes it with
a message naming the step.
"""


class BenchmarkError(Exception):
    prefix = "Benchmark failed"

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.prefix}: {self.cause}"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cause == other.cause  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.cause))


class ProviderConnectionError(BenchmarkError):
    prefix = "Failed to connect to provider"


class BlockHeightFetchError(BenchmarkError):
    prefix = "Failed to fetch latest block height"


class GasPriceFetchError(BenchmarkError):
    prefix = "Failed to fetch latest gas price"


class TransactionFetchError(BenchmarkError):
    prefix = "Failed to fetch latest transaction"


class WalletCreationError(BenchmarkError):
    prefix = "Failed to create wallet"


class ContractInteractionError(BenchmarkError):
    prefix = "Failed to interact with contract"


class ProviderError(Exception):
    """Raised by provider adapters for transport, HTTP or GraphQL failures."""


class WalletError(Exception):
    """Raised when a wallet cannot be derived from a mnemonic."""
