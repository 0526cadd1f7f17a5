"""Market data models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class StockQuote(BaseModel):
    """Read-only snapshot of one stock as listed by the market.

    The market keeps the live, mutable record; callers only ever receive
    quotes, so a later price tick never changes a quote already handed out.
    """

    model_config = ConfigDict(frozen=True)

    ticker: str
    name: str
    price: Decimal
