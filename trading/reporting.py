"""Portfolio valuation for display: per-position value and unrealized P/L."""

from __future__ import annotations

from models.money import ZERO, round2
from models.report import PortfolioReport, PositionLine
from trading.account import Account
from trading.market import Market


def build_portfolio_report(account: Account, market: Market) -> PortfolioReport:
    """Value *account* against current *market* prices.

    Lines are sorted by ticker.  A ticker that is no longer listed is priced
    at zero, so its whole cost basis shows up as unrealized loss.
    """
    lines: list[PositionLine] = []
    cost = ZERO
    market_value = ZERO
    upl = ZERO

    for position in sorted(account.portfolio.positions(), key=lambda p: p.ticker):
        price = market.price_of(position.ticker)
        if price is None:
            price = ZERO
        value = round2(price * position.shares)
        line_upl = round2((price - position.avg_cost) * position.shares)
        lines.append(
            PositionLine(
                ticker=position.ticker,
                shares=position.shares,
                avg_cost=position.avg_cost,
                price=price,
                value=value,
                upl=line_upl,
            )
        )
        cost += position.cost_basis
        market_value += value
        upl += line_upl

    return PortfolioReport(
        lines=lines,
        cash=account.cash,
        cost=round2(cost),
        market_value=round2(market_value),
        upl=round2(upl),
        net_worth=round2(account.cash + market_value),
    )
