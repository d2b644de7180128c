from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from gascalc.config import settings
from gascalc.models.request import CalculationRequest
from gascalc.models.response import ErrorResponse, GasUsedResponse
from gascalc.services.etherscan import etherscan_client
from gascalc.services.gas import calculate_gas_used
from gascalc.services.periods import SUPPORTED_PERIODS, is_known_period
from gascalc.utils.errors import InvalidRequestError

logger = logging.getLogger("routes.gas")

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    504: {"model": ErrorResponse},
}


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    field = ".".join(str(loc) for loc in first["loc"]) or "body"
    return f"Invalid parameter '{field}': {first['msg']}"


@router.post("/calculate", response_model=GasUsedResponse, responses=_ERROR_RESPONSES)
async def calculate_gas_fees(request: Request):
    """Total gas used by transactions sent from an address within a time period."""
    raw = await request.body()
    try:
        body = json.loads(raw)
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the json decoder can follow
        raise InvalidRequestError(f"Request body is not valid JSON ({len(raw)} bytes)")
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    try:
        params = CalculationRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidRequestError(_format_validation_error(e), received_body=body) from e

    if not is_known_period(params.time_period):
        if settings.strict_time_period:
            raise InvalidRequestError(
                f"Unknown time_period: '{params.time_period}'. Supported: {SUPPORTED_PERIODS}",
                received_body=body,
            )
        logger.warning(
            f"Unknown time_period '{params.time_period}', using a zero-length window"
        )

    calculation = await calculate_gas_used(
        etherscan_client,
        params.address,
        params.time_period,
        page_size=settings.txlist_page_size,
        max_pages=settings.txlist_max_pages,
    )
    return GasUsedResponse(gas_used=calculation.gas_used)
