"""Position model: one ticker's running share count and cost basis."""

from decimal import Decimal

from pydantic import BaseModel, Field

from models.money import ZERO, round4


class Position(BaseModel):
    """Holding of a single ticker with its shares-weighted average cost.

    Invariant: ``shares == 0`` implies ``avg_cost == 0``.  The portfolio drops
    a position as soon as its share count reaches zero.
    """

    ticker: str
    shares: int = Field(default=0, ge=0)
    avg_cost: Decimal = Field(default=ZERO, ge=0)

    def apply_buy(self, qty: int, price: Decimal) -> None:
        """Add *qty* shares bought at *price* and re-weight the average cost."""
        if qty <= 0:
            raise ValueError(f"Buy quantity must be positive, got {qty} for {self.ticker}.")
        cost_before = self.avg_cost * self.shares
        cost_added = price * qty
        self.shares += qty
        self.avg_cost = round4((cost_before + cost_added) / self.shares)

    def apply_sell(self, qty: int) -> None:
        """Remove *qty* shares; the caller checks that enough are held."""
        if qty <= 0:
            raise ValueError(f"Sell quantity must be positive, got {qty} for {self.ticker}.")
        self.shares -= qty
        if self.shares <= 0:
            self.shares = 0
            self.avg_cost = ZERO

    @property
    def cost_basis(self) -> Decimal:
        """Total amount paid for the shares still held."""
        return self.avg_cost * self.shares
