"""Transaction log models."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from models.money import round2


class TradeType(str, Enum):
    """Side of an executed trade."""

    BUY = "BUY"
    SELL = "SELL"


class Transaction(BaseModel):
    """Immutable record of one executed buy or sell.

    ``total`` is signed: ``+price*shares`` for a BUY and ``-price*shares`` for
    a SELL, rounded to cents.  Use ``Transaction.record`` to build one from a
    fill so the total is always derived the same way.
    """

    model_config = ConfigDict(frozen=True)

    time: datetime
    type: TradeType
    ticker: str
    shares: int = Field(gt=0)
    price: Decimal
    total: Decimal

    @classmethod
    def record(
        cls,
        trade_type: TradeType,
        ticker: str,
        shares: int,
        price: Decimal,
        time: datetime,
    ) -> "Transaction":
        """Build a transaction for a fill of *shares* at *price*."""
        sign = 1 if trade_type is TradeType.BUY else -1
        return cls(
            time=time,
            type=trade_type,
            ticker=ticker,
            shares=shares,
            price=price,
            total=sign * round2(price * shares),
        )
