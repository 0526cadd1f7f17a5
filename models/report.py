"""Portfolio view models: per-position valuation and account totals."""

from decimal import Decimal

from pydantic import BaseModel


class PositionLine(BaseModel):
    """One row of the portfolio view."""

    ticker: str
    shares: int
    avg_cost: Decimal
    price: Decimal  # 0 when the ticker is no longer listed
    value: Decimal
    upl: Decimal


class PortfolioReport(BaseModel):
    """Valuation of an account against current market prices."""

    lines: list[PositionLine] = []
    cash: Decimal
    cost: Decimal
    market_value: Decimal
    upl: Decimal
    net_worth: Decimal
