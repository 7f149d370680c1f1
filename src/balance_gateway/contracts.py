"""Response contracts for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field


class BalanceResponse(BaseModel):
    """Native balance of one account, as a decimal string."""

    model_config = ConfigDict(frozen=True)

    balance: str = Field(
        ...,
        pattern=r"^[0-9]+$",
        description="Balance in the smallest native unit (wei), decimal encoded",
    )
