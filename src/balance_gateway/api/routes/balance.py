"""Balance endpoint."""

from fastapi import APIRouter, Depends

from balance_gateway.api.deps import get_balance_service
from balance_gateway.contracts import BalanceResponse
from balance_gateway.services.balance_service import BalanceService

router = APIRouter()


@router.get("/balance/{address}", response_model=BalanceResponse)
async def get_balance(
    address: str,
    service: BalanceService = Depends(get_balance_service),
) -> BalanceResponse:
    """Get the native balance of an account.

    Args:
        address: 0x-prefixed 40 hex digit account address

    Returns:
        {"balance": "<wei as decimal string>"}
    """
    return await service.get_balance(address)
