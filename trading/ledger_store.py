"""Flat-file persistence for an ``Account``.

A ledger is three files sharing a prefix inside one directory::

    {data_dir}/
    ├── {prefix}_cash.txt          # single line: cash balance
    ├── {prefix}_portfolio.csv     # ticker,shares,avgCost
    └── {prefix}_transactions.csv  # time,type,ticker,shares,price,total

Saves rewrite each file whole.  Loads treat a missing file as empty and
reject malformed content with ``LedgerFormatError``; the account is only
updated once all three files have parsed.
"""

from __future__ import annotations

import csv
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from models.money import to_decimal
from models.position import Position
from models.transaction import TradeType, Transaction
from trading.account import Account

logger = logging.getLogger(__name__)

PORTFOLIO_HEADER = ["ticker", "shares", "avgCost"]
TRANSACTION_HEADER = ["time", "type", "ticker", "shares", "price", "total"]


class LedgerFormatError(ValueError):
    """A ledger file exists but cannot be parsed."""

    def __init__(self, path: Path, line_no: int, reason: str) -> None:
        super().__init__(f"{path}:{line_no}: {reason}")
        self.path = path
        self.line_no = line_no
        self.reason = reason


class LedgerStore:
    """Reads and writes the cash, portfolio and transaction files."""

    def __init__(self, data_dir: str | Path = ".", prefix: str = "data") -> None:
        self._data_dir = Path(data_dir)
        self._prefix = prefix

    @property
    def cash_path(self) -> Path:
        return self._data_dir / f"{self._prefix}_cash.txt"

    @property
    def portfolio_path(self) -> Path:
        return self._data_dir / f"{self._prefix}_portfolio.csv"

    @property
    def transactions_path(self) -> Path:
        return self._data_dir / f"{self._prefix}_transactions.csv"

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self, account: Account) -> None:
        """Write *account* to the three ledger files."""
        self._data_dir.mkdir(parents=True, exist_ok=True)

        self.cash_path.write_text(f"{account.cash}\n", encoding="utf-8")

        with self.portfolio_path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh, lineterminator="\n")
            writer.writerow(PORTFOLIO_HEADER)
            for position in account.portfolio.positions():
                writer.writerow([position.ticker, position.shares, position.avg_cost])

        with self.transactions_path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh, lineterminator="\n")
            writer.writerow(TRANSACTION_HEADER)
            for tx in account.history:
                writer.writerow(
                    [tx.time.isoformat(), tx.type.value, tx.ticker, tx.shares, tx.price, tx.total]
                )

        logger.info(
            "Saved ledger '%s' to %s: %d position(s), %d transaction(s).",
            self._prefix,
            self._data_dir,
            len(account.portfolio),
            len(account.history),
        )

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load(self, account: Account) -> None:
        """Replace *account*'s state with what is on disk.

        A missing cash file leaves the cash balance as it is; a missing
        portfolio or transaction file yields an empty collection.  Raises
        ``LedgerFormatError`` (and leaves *account* untouched) if any file is
        malformed.
        """
        cash = self._read_cash()
        positions = self._read_positions()
        history = self._read_transactions()

        if cash is not None:
            account.cash = cash
        account.portfolio.replace(positions)
        account.history = history
        logger.info(
            "Loaded ledger '%s' from %s: %d position(s), %d transaction(s).",
            self._prefix,
            self._data_dir,
            len(positions),
            len(history),
        )

    def _read_cash(self) -> Decimal | None:
        path = self.cash_path
        if not path.exists():
            logger.debug("No cash file at %s; keeping current balance.", path)
            return None
        lines = path.read_text(encoding="utf-8").splitlines()
        if not lines or not lines[0].strip():
            raise LedgerFormatError(path, 1, "cash file is empty")
        try:
            cash = to_decimal(lines[0])
        except ValueError as exc:
            raise LedgerFormatError(path, 1, str(exc)) from exc
        if cash < 0:
            raise LedgerFormatError(path, 1, f"negative cash balance {cash}")
        return cash

    def _read_positions(self) -> list[Position]:
        positions: list[Position] = []
        seen: set[str] = set()
        for line_no, row in _read_rows(self.portfolio_path, PORTFOLIO_HEADER):
            ticker_text, shares_text, avg_text = row
            ticker = ticker_text.upper()
            try:
                shares = int(shares_text)
                avg_cost = to_decimal(avg_text)
            except ValueError as exc:
                raise LedgerFormatError(self.portfolio_path, line_no, str(exc)) from exc
            if not ticker:
                raise LedgerFormatError(self.portfolio_path, line_no, "empty ticker")
            if ticker in seen:
                raise LedgerFormatError(self.portfolio_path, line_no, f"duplicate ticker {ticker}")
            if shares <= 0 or avg_cost < 0:
                raise LedgerFormatError(
                    self.portfolio_path,
                    line_no,
                    f"invalid position {ticker}: shares={shares}, avgCost={avg_cost}",
                )
            seen.add(ticker)
            positions.append(Position(ticker=ticker, shares=shares, avg_cost=avg_cost))
        return positions

    def _read_transactions(self) -> list[Transaction]:
        history: list[Transaction] = []
        for line_no, row in _read_rows(self.transactions_path, TRANSACTION_HEADER):
            time_text, type_text, ticker, shares_text, price_text, total_text = row
            try:
                history.append(
                    Transaction(
                        time=datetime.fromisoformat(time_text),
                        type=TradeType(type_text),
                        ticker=ticker.upper(),
                        shares=int(shares_text),
                        price=to_decimal(price_text),
                        total=to_decimal(total_text),
                    )
                )
            except ValueError as exc:
                # pydantic's ValidationError is a ValueError too.
                raise LedgerFormatError(self.transactions_path, line_no, str(exc)) from exc
            _check_transaction(self.transactions_path, line_no, history[-1])
        return history


def _check_transaction(path: Path, line_no: int, tx: Transaction) -> None:
    """Reject a negative price or a total whose sign does not match the side."""
    if not tx.ticker:
        raise LedgerFormatError(path, line_no, "empty ticker")
    if tx.price < 0:
        raise LedgerFormatError(path, line_no, f"negative price {tx.price}")
    if (tx.type is TradeType.BUY and tx.total < 0) or (tx.type is TradeType.SELL and tx.total > 0):
        raise LedgerFormatError(
            path, line_no, f"total {tx.total} has the wrong sign for {tx.type.value}"
        )


def _read_rows(path: Path, header: list[str]) -> list[tuple[int, list[str]]]:
    """Return ``(line_no, row)`` pairs after checking the header.

    A missing file yields no rows.  Blank lines are skipped.
    """
    if not path.exists():
        logger.debug("No ledger file at %s; treating as empty.", path)
        return []

    rows: list[tuple[int, list[str]]] = []
    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.reader(fh)
        first = next(reader, None)
        if first is None:
            return []
        if [col.strip() for col in first] != header:
            raise LedgerFormatError(
                path, 1, f"expected header {','.join(header)}, got {','.join(first)}"
            )
        for row in reader:
            if not row or all(not col.strip() for col in row):
                continue
            if len(row) != len(header):
                raise LedgerFormatError(
                    path,
                    reader.line_num,
                    f"expected {len(header)} columns, got {len(row)}",
                )
            rows.append((reader.line_num, [col.strip() for col in row]))
    return rows
