"""
Load benchmark config from environment.
Never log MNEMONIC or any key material.
"""
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PROVIDER_URLS = "mainnet.fuel.network,fuel.liquify.com/v1/graphql"


def _get(key: str, default: Optional[str] = None) -> str:
    v = os.environ.get(key, default)
    if v is None:
        raise ValueError(f"Missing required env: {key}")
    return v.strip()


def _get_float(key: str, default: float) -> float:
    try:
        return float(os.environ.get(key, str(default)))
    except (TypeError, ValueError):
        return default


def _get_int(key: str, default: int) -> int:
    try:
        return int(os.environ.get(key, str(default)))
    except (TypeError, ValueError):
        return default


def _get_bool(key: str, default: bool = False) -> bool:
    v = os.environ.get(key, str(default)).strip().lower()
    return v in ("1", "true", "yes", "on")


def _get_list(key: str, default: str) -> List[str]:
    raw = os.environ.get(key, default)
    return [u.strip() for u in raw.split(",") if u.strip()]


# Required only at process start; read lazily so tests can clear it
def get_mnemonic() -> str:
    v = _get("MNEMONIC")
    if not v:
        raise ValueError("Missing required env: MNEMONIC")
    return v


def get_provider_urls() -> List[str]:
    """Ordered endpoint list; order is benchmark order."""
    return _get_list("PROVIDER_URLS", DEFAULT_PROVIDER_URLS)


def get_contract_id() -> str:
    return _get("CONTRACT_ID", "contract_id")


# Benchmark
BENCH_CONTRACT: bool = _get_bool("BENCH_CONTRACT", False)
BENCH_SAMPLES: int = _get_int("BENCH_SAMPLES", 5)

# Transport
REQUEST_TIMEOUT: float = _get_float("REQUEST_TIMEOUT", 10.0)

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

# Wallet derivation: m/44'/<FUEL_COIN_TYPE>'/<account>'/0/0
FUEL_COIN_TYPE: int = 1179993420
ACCOUNT_INDEX: int = 0
# Transactions fetched per node benchmark
TX_PAGE_SIZE: int = 10
