from __future__ import annotations

import logging
from typing import Any

import httpx

from gascalc.config import settings
from gascalc.utils.errors import (
    UpstreamAPIError,
    UpstreamHTTPError,
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from gascalc.utils.numbers import parse_uint

logger = logging.getLogger("etherscan")

NO_TRANSACTIONS_MESSAGE = "No transactions found"


def _raise_for_api_status(data: dict[str, Any], what: str) -> None:
    """Explorer errors come back as HTTP 200 with status "0" and the reason in result."""
    if str(data.get("status")) != "0":
        return
    result = data.get("result")
    detail = result if isinstance(result, str) and result else data.get("message")
    raise UpstreamAPIError(f"Explorer {what} error: {detail or 'unknown error'}")


class EtherscanClient:
    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 10.0,
        chain_id: int | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._chain_id = chain_id
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def _get(self, params: dict[str, Any]) -> dict[str, Any]:
        query: dict[str, Any] = dict(params)
        if self._chain_id is not None:
            query["chainid"] = self._chain_id
        query["apikey"] = self._api_key

        action = f"{params.get('module')}/{params.get('action')}"
        client = self._get_client()
        try:
            resp = await client.get(self._base_url, params=query)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(f"Explorer request {action} timed out") from e
        except httpx.HTTPStatusError as e:
            raise UpstreamHTTPError(
                f"Explorer request {action} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TransportError as e:
            raise UpstreamUnavailableError(
                f"Explorer request {action} failed: {type(e).__name__}"
            ) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamResponseError(
                f"Explorer request {action} returned invalid JSON"
            ) from e
        if not isinstance(data, dict):
            raise UpstreamResponseError(
                f"Explorer request {action} returned {type(data).__name__}, expected object"
            )
        return data

    async def get_block_number_by_timestamp(self, timestamp: int) -> int:
        """Closest block mined at or before ``timestamp`` (UNIX seconds)."""
        data = await self._get({
            "module": "block",
            "action": "getblocknobytime",
            "timestamp": timestamp,
            "closest": "before",
        })
        if "result" not in data:
            raise UpstreamResponseError("Block lookup response has no 'result' field")
        _raise_for_api_status(data, "block lookup")
        block_number = parse_uint(data["result"], "result")
        logger.debug(f"Block at or before {timestamp}: {block_number}")
        return block_number

    async def get_transactions(
        self,
        address: str,
        start_block: int,
        end_block: int,
        page: int | None = None,
        offset: int | None = None,
    ) -> list[dict]:
        params: dict[str, Any] = {
            "module": "account",
            "action": "txlist",
            "address": address,
            "startblock": start_block,
            "endblock": end_block,
            "sort": "asc",
        }
        if page is not None:
            params["page"] = page
        if offset is not None:
            params["offset"] = offset

        data = await self._get(params)
        result = data.get("result")
        if str(data.get("status")) == "0" and data.get("message") == NO_TRANSACTIONS_MESSAGE:
            return []
        _raise_for_api_status(data, "txlist")

        if not isinstance(result, list):
            raise UpstreamResponseError("txlist response 'result' is not a list")
        if not all(isinstance(tx, dict) for tx in result):
            raise UpstreamResponseError("txlist response contains a non-object transaction")
        return result

    async def iter_transactions(
        self,
        address: str,
        start_block: int,
        end_block: int,
        page_size: int = 0,
        max_pages: int = 10,
    ) -> list[dict]:
        """Fetch the full transaction list, paging when ``page_size`` > 0."""
        if page_size <= 0:
            return await self.get_transactions(address, start_block, end_block)

        transactions: list[dict] = []
        for page in range(1, max_pages + 1):
            batch = await self.get_transactions(
                address, start_block, end_block, page=page, offset=page_size
            )
            transactions.extend(batch)
            if len(batch) < page_size:
                break
        else:
            logger.warning(
                f"txlist for {address} stopped at page cap ({max_pages} x {page_size}), "
                f"result may be truncated"
            )
        return transactions


etherscan_client = EtherscanClient(
    api_key=settings.etherscan_api_key,
    base_url=settings.etherscan_base_url,
    timeout=settings.request_timeout_seconds,
    chain_id=settings.etherscan_chain_id,
)
