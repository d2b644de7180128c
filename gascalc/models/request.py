from typing import Annotated

from pydantic import BaseModel, StrictStr, StringConstraints


class CalculationRequest(BaseModel):
    address: Annotated[StrictStr, StringConstraints(strip_whitespace=True, min_length=1)]
    # Matched exactly against the period names, so no stripping here
    time_period: StrictStr
