"""
XRPL signer protocol — the secrets boundary.

Recipes pass an autofilled transaction to the signer and get back the
signed transaction. Private keys never leave the signer.

Concrete implementation:
    - WalletSigner (xrpl-py Wallet derived from a seed)

The signer exposes a key_id (the public key hex) that may be logged
without leaking secrets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from xrpl.models.transactions.transaction import Transaction
from xrpl.transaction import sign
from xrpl.wallet import Wallet


@dataclass(frozen=True)
class SignResult:
    """Result of signing a transaction.

    Attributes:
        signed_tx: The signed transaction, ready for submit_and_wait().
        tx_hash: Transaction hash of the signed transaction (64 hex chars).
        key_id: Public key of the signing key. Never a secret.
    """

    signed_tx: Transaction
    tx_hash: str
    key_id: str


@runtime_checkable
class XRPLSigner(Protocol):
    """Interface for XRPL transaction signing."""

    @property
    def account(self) -> str:
        """XRPL r-address associated with this signer."""
        ...

    @property
    def key_id(self) -> str:
        """Public identifier of the signing key (safe for logging)."""
        ...

    def sign(self, tx: Transaction) -> SignResult:
        """Sign an autofilled transaction.

        Raises:
            ValueError: If the transaction belongs to another account.
        """
        ...


class WalletSigner:
    """Single-signature signer backed by an xrpl-py Wallet."""

    def __init__(self, wallet: Wallet) -> None:
        self._wallet = wallet

    @classmethod
    def from_seed(cls, seed: str) -> WalletSigner:
        return cls(Wallet.from_seed(seed))

    @property
    def account(self) -> str:
        return self._wallet.address

    @property
    def key_id(self) -> str:
        return self._wallet.public_key

    def __repr__(self) -> str:
        return f"WalletSigner(account={self.account!r})"

    def sign(self, tx: Transaction) -> SignResult:
        if tx.account != self.account:
            raise ValueError(
                f"transaction Account {tx.account!r} does not match signer {self.account!r}"
            )
        signed = sign(tx, self._wallet)
        return SignResult(signed_tx=signed, tx_hash=signed.get_hash(), key_id=self.key_id)
