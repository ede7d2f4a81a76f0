from __future__ import annotations

"""
Abstract interfaces for the collaborators a benchmark talks to:

1) NodeProvider    – a connected RPC endpoint (block height, gas price, txs)
2) Wallet          – key material derived from a mnemonic, bound to a provider
3) MarketContract  – handle on a deployed market contract (read calls)

These are pure interfaces (no logic) so benchmark routines can run against
the real Fuel GraphQL adapter or a mock with injected delays, without
changing the timing code.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from .types import PaginationRequest, TransactionPage


class NodeProvider(ABC):
    """Connected RPC endpoint. Every call is one request/response round trip."""

    url: str

    @abstractmethod
    def latest_block_height(self) -> int:
        """Height of the newest block the node knows about."""

    @abstractmethod
    def latest_gas_price(self) -> int:
        """Current gas price reported by the node."""

    @abstractmethod
    def get_transactions(self, request: PaginationRequest) -> TransactionPage:
        """Return one page of transaction history shaped by `request`."""

    @abstractmethod
    def contract(self, contract_id: str) -> Optional[dict]:
        """Deployed contract record for `contract_id`, or None if absent."""


class Wallet(ABC):
    """Derived account bound to a provider. Never exposes the private key in repr."""

    address: str
    provider: NodeProvider


class MarketContract(ABC):
    """Handle on a deployed market contract."""

    @abstractmethod
    def matcher_fee(self) -> Any:
        """Read-only call; returns whatever the binding reports for the fee."""
