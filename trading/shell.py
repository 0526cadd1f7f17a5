"""Interactive console menu for the trading simulator.

The shell is thin glue: it reads a choice, calls into ``Account``,
``Market`` and ``LedgerStore``, and prints the result.  Input and output are
injected so the whole loop can be driven from tests.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from decimal import Decimal
from typing import TextIO

from trading.account import Account
from trading.ledger_store import LedgerFormatError, LedgerStore
from trading.market import Market
from trading.reporting import build_portfolio_report

logger = logging.getLogger(__name__)

MENU = """
==== MENU ====
1) Update market (tick prices)
2) List market data
3) Buy stock
4) Sell stock
5) View portfolio & P/L
6) View transactions
7) Save ({prefix}_*)
8) Load ({prefix}_*)
9) Net worth
0) Exit"""

RULE = "-" * 61


class TradingShell:
    """Menu loop over one account, one market and one ledger store."""

    def __init__(
        self,
        account: Account,
        market: Market,
        store: LedgerStore,
        prefix: str = "data",
        currency: str = "₹",
        input_fn: Callable[[str], str] = input,
        out: TextIO | None = None,
    ) -> None:
        self._account = account
        self._market = market
        self._store = store
        self._prefix = prefix
        self._currency = currency
        self._input = input_fn
        self._out = out if out is not None else sys.stdout

    def run(self) -> None:
        """Loop until the user picks 0 or input runs out."""
        self._print("Welcome to the Stock Trading Simulator")
        while True:
            self._print(MENU.format(prefix=self._prefix))
            try:
                choice = self._input("Select: ").strip()
            except EOFError:
                self._print("Goodbye!")
                return
            if not self.handle(choice):
                return

    def handle(self, choice: str) -> bool:
        """Run one menu action; return ``False`` when the loop should stop."""
        if choice == "0":
            self._print("Goodbye!")
            return False

        actions: dict[str, Callable[[], None]] = {
            "1": self._tick,
            "2": self._list_market,
            "3": self._buy,
            "4": self._sell,
            "5": self._show_portfolio,
            "6": self._show_history,
            "7": self._save,
            "8": self._load,
            "9": self._show_net_worth,
        }
        action = actions.get(choice)
        if action is None:
            self._print("Invalid option.")
        else:
            action()
        return True

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _tick(self) -> None:
        self._market.tick_all()
        self._print("Market updated.")

    def _list_market(self) -> None:
        self._market.tick_all()
        self._print("\nTICKER NAME               PRICE")
        self._print("-" * 40)
        for quote in self._market.list():
            self._print(f"{quote.ticker:<6} {quote.name:<18} {self._money(quote.price)}")

    def _buy(self) -> None:
        ticker, qty = self._ask_order()
        if self._account.buy(self._market, ticker, qty):
            self._print("BUY executed.")
        else:
            self._print("BUY failed.")

    def _sell(self) -> None:
        ticker, qty = self._ask_order()
        if self._account.sell(self._market, ticker, qty):
            self._print("SELL executed.")
        else:
            self._print("SELL failed.")

    def _show_portfolio(self) -> None:
        report = build_portfolio_report(self._account, self._market)
        self._print("\nYour Portfolio")
        self._print("TICKER  SHARES  AVG COST   PRICE     MKT VALUE   UPL")
        self._print(RULE)
        for line in report.lines:
            self._print(
                f"{line.ticker:<6}  {line.shares:>6d}  {self._money(line.avg_cost):>9}  "
                f"{self._money(line.price):>8}  {self._money(line.value):>10}  "
                f"{self._money(line.upl):>9}"
            )
        self._print(RULE)
        self._print(
            f"Cash: {self._money(report.cash)} | Cost: {self._money(report.cost)} | "
            f"Mkt Value: {self._money(report.market_value)} | UPL: {self._money(report.upl)} | "
            f"Net Worth: {self._money(report.net_worth)}"
        )

    def _show_history(self) -> None:
        self._print("\nTransactions")
        if not self._account.history:
            self._print("(none)")
            return
        for tx in self._account.history:
            sign = "-" if tx.total < 0 else ""
            self._print(
                f"{tx.time:%Y-%m-%d %H:%M:%S}  {tx.type.value:<4} {tx.ticker:<6} "
                f"{tx.shares:>4d} @ {self._money(tx.price)}  total: {sign}{self._money(abs(tx.total))}"
            )

    def _save(self) -> None:
        try:
            self._store.save(self._account)
        except OSError as exc:
            logger.error("Save failed: %s", exc)
            self._print(f"Save failed: {exc}")
            return
        self._print(f"Saved to {self._prefix}_* files.")

    def _load(self) -> None:
        try:
            self._store.load(self._account)
        except (OSError, LedgerFormatError) as exc:
            logger.error("Load failed: %s", exc)
            self._print(f"Load failed: {exc}")
            return
        self._print(f"Loaded from {self._prefix}_* files.")

    def _show_net_worth(self) -> None:
        value = self._account.portfolio.market_value(self._market)
        self._print(
            f"Cash: {self._money(self._account.cash)} | Portfolio: {self._money(value)} | "
            f"Net Worth: {self._money(self._account.net_worth(self._market))}"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ask_order(self) -> tuple[str, int]:
        ticker = self._input("Enter Ticker: ").strip().upper()
        qty = parse_quantity(self._input("Enter Quantity: "))
        return ticker, qty

    def _money(self, value: Decimal) -> str:
        return f"{self._currency}{value:,.2f}"

    def _print(self, text: str) -> None:
        print(text, file=self._out)


def parse_quantity(text: str) -> int:
    """Parse a share count; anything that is not an integer becomes -1."""
    try:
        return int(text.strip())
    except ValueError:
        return -1
