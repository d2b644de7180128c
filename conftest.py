from __future__ import annotations

import os

# Required settings must exist before gascalc.config is imported.
os.environ.setdefault("ETHERSCAN_API_KEY", "test-api-key")
os.environ.setdefault("HOST", "127.0.0.1")
os.environ.setdefault("PORT", "8080")

import pytest  # noqa: E402


@pytest.fixture
def make_transaction():
    """Factory fixture for txlist result entries as the explorer returns them."""

    def _make(
        sender: str = "0xabc",
        gas_used: str = "21000",
        to: str = "0xdef",
        tx_hash: str = "0x01",
        block_number: str = "100",
    ) -> dict:
        return {
            "blockNumber": block_number,
            "hash": tx_hash,
            "from": sender,
            "to": to,
            "value": "0",
            "gas": "30000",
            "gasPrice": "1000000000",
            "gasUsed": gas_used,
            "isError": "0",
        }

    return _make


@pytest.fixture
def txlist_payload():
    """Wraps transactions in the explorer's txlist envelope."""

    def _wrap(transactions: list[dict]) -> dict:
        return {"status": "1", "message": "OK", "result": transactions}

    return _wrap
