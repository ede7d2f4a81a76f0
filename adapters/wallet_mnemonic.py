"""
Fuel wallet derivation from a BIP39 mnemonic.

Key derivation is standard BIP32 secp256k1 (via eth_account's HD wallet
support); the Fuel address is sha256 of the 64-byte uncompressed public key.
"""
import hashlib
import logging
from dataclasses import dataclass, field

from eth_account import Account
from eth_keys import keys

from config import ACCOUNT_INDEX, FUEL_COIN_TYPE
from core.errors import WalletError
from core.interfaces import NodeProvider, Wallet

logger = logging.getLogger(__name__)

Account.enable_unaudited_hdwallet_features()


def derivation_path(account_index: int = ACCOUNT_INDEX) -> str:
    """m/44'/1179993420'/{account_index}'/0/0"""
    if account_index < 0:
        raise ValueError(f"account_index must be >= 0, got {account_index}")
    return f"m/44'/{FUEL_COIN_TYPE}'/{account_index}'/0/0"


def fuel_address(public_key: bytes) -> str:
    """0x-prefixed Fuel address for a 64-byte uncompressed public key."""
    if len(public_key) != 64:
        raise ValueError(f"expected 64-byte public key, got {len(public_key)}")
    return "0x" + hashlib.sha256(public_key).hexdigest()


@dataclass
class FuelWallet(Wallet):
    address: str
    path: str
    provider: NodeProvider = field(repr=False)


def wallet_from_mnemonic(mnemonic: str, provider: NodeProvider, path: str) -> FuelWallet:
    """
    Derive the account at `path` and bind it to `provider`.
    Raises WalletError for an invalid mnemonic or path.
    """
    try:
        acct = Account.from_mnemonic(mnemonic, account_path=path)
        public_key = keys.PrivateKey(acct.key).public_key.to_bytes()
    except Exception as e:
        raise WalletError(str(e) or type(e).__name__) from e
    address = fuel_address(public_key)
    logger.debug("Derived wallet %s at %s", address, path)
    return FuelWallet(address=address, path=path, provider=provider)
