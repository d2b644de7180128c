from __future__ import annotations

from pydantic import BaseModel, Field


class GasUsedResponse(BaseModel):
    gas_used: int = Field(ge=0)

    model_config = {
        "json_schema_extra": {
            "example": {"gas_used": 71000}
        }
    }


class ErrorResponse(BaseModel):
    error: str
    reason: str | None = None
    received_body: dict | None = None
