import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from gascalc.config import settings
from gascalc.routes.gas import router as gas_router
from gascalc.services.etherscan import etherscan_client
from gascalc.utils.errors import GasCalcError, error_response

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(name)-20s | %(levelname)-7s | %(message)s",
)
logger = logging.getLogger("app")

class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} → {response.status_code} "
            f"({duration_ms:.1f}ms)"
        )
        return response


app = FastAPI(
    title="Gas Usage Calculator API",
    description=(
        "Sum the gas used by transactions sent from an address "
        "over a named time period, via the Etherscan API."
    ),
    version="0.1.0",
)

app.add_middleware(RequestTimingMiddleware)

app.include_router(gas_router)


@app.exception_handler(GasCalcError)
async def gas_calc_error_handler(request: Request, exc: GasCalcError):
    logger.warning(
        f"{request.method} {request.url.path} failed: {exc.status_code} "
        f"{exc.reason}: {exc.message}"
    )
    return error_response(
        exc.status_code, exc.message, exc.reason, received_body=exc.received_body
    )


@app.on_event("startup")
async def startup():
    logger.info(f"Ready: explorer endpoint {etherscan_client.base_url}")


@app.on_event("shutdown")
async def shutdown():
    await etherscan_client.aclose()


@app.get("/", response_class=PlainTextResponse)
async def index():
    return "Hello world!"


def main():
    uvicorn.run(
        "gascalc.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
