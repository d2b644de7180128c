from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass

from gascalc.services.etherscan import EtherscanClient
from gascalc.services.periods import is_all_time, period_offset_seconds
from gascalc.utils.errors import UpstreamResponseError
from gascalc.utils.numbers import parse_uint

logger = logging.getLogger("gas")


@dataclass(frozen=True)
class BlockRange:
    start_block: int
    end_block: int


@dataclass(frozen=True)
class GasCalculation:
    address: str
    time_period: str
    block_range: BlockRange
    transactions_fetched: int
    gas_used: int


def sum_gas_used(transactions: Iterable[dict], address: str) -> int:
    """Sum ``gasUsed`` over transactions sent from ``address`` (case-insensitive)."""
    target = address.lower()
    total = 0
    for tx in transactions:
        sender = tx.get("from")
        if not isinstance(sender, str):
            raise UpstreamResponseError("Transaction is missing a 'from' field")
        if sender.lower() != target:
            continue
        if "gasUsed" not in tx:
            raise UpstreamResponseError(
                f"Transaction {tx.get('hash', '?')} is missing 'gasUsed'"
            )
        total += parse_uint(tx["gasUsed"], "gasUsed")
    return total


async def resolve_block_range(
    client: EtherscanClient, time_period: str, now: int
) -> BlockRange:
    end_block = await client.get_block_number_by_timestamp(now)
    if is_all_time(time_period):
        return BlockRange(start_block=0, end_block=end_block)

    start_timestamp = now - period_offset_seconds(time_period)
    start_block = await client.get_block_number_by_timestamp(start_timestamp)
    return BlockRange(start_block=start_block, end_block=end_block)


async def calculate_gas_used(
    client: EtherscanClient,
    address: str,
    time_period: str,
    now: int | None = None,
    page_size: int = 0,
    max_pages: int = 10,
) -> GasCalculation:
    if now is None:
        now = int(time.time())

    block_range = await resolve_block_range(client, time_period, now)
    transactions = await client.iter_transactions(
        address,
        block_range.start_block,
        block_range.end_block,
        page_size=page_size,
        max_pages=max_pages,
    )
    gas_used = sum_gas_used(transactions, address)

    logger.info(
        f"{address} {time_period}: blocks {block_range.start_block}-"
        f"{block_range.end_block}, {len(transactions)} txs, gas_used={gas_used}"
    )
    return GasCalculation(
        address=address,
        time_period=time_period,
        block_range=block_range,
        transactions_fetched=len(transactions),
        gas_used=gas_used,
    )
