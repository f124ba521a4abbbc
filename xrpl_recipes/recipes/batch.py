"""
Batch recipes — one per batch mode, plus an NFT mint-then-burn flow.

Every recipe submits from the issuer's account and returns the
BatchOutcome; nothing here decides how to present it.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from decimal import Decimal

from xrpl.asyncio.clients import Client
from xrpl.models import BatchFlag, NFTokenMintFlag, Payment
from xrpl.utils import xrp_to_drops

from xrpl_recipes.batch.runner import BatchOutcome, run_batch
from xrpl_recipes.xrpl.client import XRPLClient
from xrpl_recipes.xrpl.errors import BatchError
from xrpl_recipes.xrpl.signer import XRPLSigner
from xrpl_recipes.xrpl.tx import MAX_INNER_TRANSACTIONS, nftoken_burn, nftoken_mint, payment

logger = logging.getLogger(__name__)

NFT_URI = "ipfs://bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi"

Recipe = Callable[[Client, XRPLClient, XRPLSigner, str], Awaitable[BatchOutcome]]


def _xrp_payments(account: str, destination: str, amounts_xrp: list[str]) -> list[Payment]:
    return [
        payment(account, destination, xrp_to_drops(Decimal(amount)))
        for amount in amounts_xrp
    ]


async def all_or_nothing(
    client: Client, ledger: XRPLClient, issuer: XRPLSigner, destination: str
) -> BatchOutcome:
    """Two payments that either both apply or are both rolled back."""
    inner_txs = _xrp_payments(issuer.account, destination, ["1", "0.5"])
    return await run_batch(client, ledger, issuer, inner_txs, BatchFlag.TF_ALL_OR_NOTHING)


async def only_one(
    client: Client, ledger: XRPLClient, issuer: XRPLSigner, destination: str
) -> BatchOutcome:
    """Payments in priority order; the first one that succeeds wins."""
    inner_txs = _xrp_payments(issuer.account, destination, ["3", "2", "1"])
    return await run_batch(client, ledger, issuer, inner_txs, BatchFlag.TF_ONLY_ONE)


async def until_failure(
    client: Client, ledger: XRPLClient, issuer: XRPLSigner, destination: str
) -> BatchOutcome:
    """The second payment is unfunded, so the third one is never applied."""
    inner_txs = _xrp_payments(issuer.account, destination, ["0.5", "999999", "0.5"])
    return await run_batch(client, ledger, issuer, inner_txs, BatchFlag.TF_UNTIL_FAILURE)


async def independent(
    client: Client, ledger: XRPLClient, issuer: XRPLSigner, destination: str
) -> BatchOutcome:
    """Three payments applied or failed independently of each other."""
    inner_txs = _xrp_payments(issuer.account, destination, ["0.3", "0.4", "0.5"])
    return await run_batch(client, ledger, issuer, inner_txs, BatchFlag.TF_INDEPENDENT)


async def minted_nftoken_ids(ledger: XRPLClient, minted: BatchOutcome) -> list[str]:
    """NFTokenIDs created by the successful mints of ``minted``, in batch order.

    Read from each mint's own metadata, so NFTs the account held before
    are never picked up.
    """
    results = await asyncio.gather(
        *(ledger.get_tx(status.hash) for status in minted.statuses if status.successful)
    )
    return [result.nftoken_id for result in results if result.nftoken_id]


async def nft_mint_and_burn(
    client: Client, ledger: XRPLClient, issuer: XRPLSigner, destination: str
) -> BatchOutcome:
    """Mint a full batch of NFTs, then burn them in a second batch.

    ``destination`` is unused; the NFTs never leave the issuer.

    Returns:
        The outcome of the burn batch.

    Raises:
        BatchError: If fewer than two minted NFTokenIDs could be read back.
    """
    count = MAX_INNER_TRANSACTIONS
    flags = NFTokenMintFlag.TF_BURNABLE | NFTokenMintFlag.TF_TRANSFERABLE
    mints = [
        nftoken_mint(issuer.account, NFT_URI, flags=flags, transfer_fee=0)
        for _ in range(count)
    ]
    minted = await run_batch(client, ledger, issuer, mints, BatchFlag.TF_INDEPENDENT)
    logger.info("minted %d of %d NFTs in %s", minted.succeeded, count, minted.batch_hash)

    nftoken_ids = await minted_nftoken_ids(ledger, minted)
    if len(nftoken_ids) < 2:
        raise BatchError(
            f"{len(nftoken_ids)} minted NFTokenIDs read back from {minted.batch_hash}; "
            "a Batch needs at least two inner transactions"
        )

    burns = [nftoken_burn(issuer.account, nftoken_id) for nftoken_id in nftoken_ids]
    return await run_batch(client, ledger, issuer, burns, BatchFlag.TF_INDEPENDENT)


RECIPES: dict[str, Recipe] = {
    "all-or-nothing": all_or_nothing,
    "only-one": only_one,
    "until-failure": until_failure,
    "independent": independent,
    "nft-mint-and-burn": nft_mint_and_burn,
}
