from __future__ import annotations

import logging
import re
from typing import Any, Dict

from core.errors import ProviderError
from core.interfaces import MarketContract, Wallet

logger = logging.getLogger(__name__)

_CONTRACT_ID_RE = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")


def parse_contract_id(value: str) -> str:
    """Validate a 32-byte contract id; returns it lowercased with 0x prefix."""
    raw = (value or "").strip()
    if not _CONTRACT_ID_RE.match(raw):
        raise ValueError(f"invalid contract id: {value!r} (expected 32 bytes as hex)")
    if raw.startswith("0x"):
        raw = raw[2:]
    return "0x" + raw.lower()


class SparkMarketContract(MarketContract):
    """
    Read-only handle on a deployed Spark market contract.

    matcher_fee() goes through the wallet's provider as a single contract
    lookup; decoding the ABI-encoded fee value needs a Sway ABI codec, which
    this repo does not ship, so the raw contract record is returned.
    """

    def __init__(self, contract_id: str, wallet: Wallet) -> None:
        self.contract_id = parse_contract_id(contract_id)
        self.wallet = wallet

    def matcher_fee(self) -> Dict[str, Any]:
        record = self.wallet.provider.contract(self.contract_id)
        if not record:
            raise ProviderError(f"no contract deployed at {self.contract_id}")
        logger.debug("matcher_fee read from %s", self.contract_id)
        return record
