"""FastAPI dependencies."""

from fastapi import Request

from balance_gateway.services.balance_service import BalanceService


def get_balance_service(request: Request) -> BalanceService:
    """Balance service attached to the running app by create_app()."""
    return request.app.state.balance_service
