#!/usr/bin/env python3
"""CLI entrypoint for the stock trading simulator.

Usage::

    python run_trading.py
    python run_trading.py --config config/example.yaml
    python run_trading.py --data-dir ledgers/ --prefix alice --seed 42

Settings come from the YAML config (defaults apply when ``--config`` is
omitted); command-line flags override the matching config values.
"""

from __future__ import annotations

import argparse
import logging
import sys

from models.config import TradingConfig
from trading.account import Account
from trading.ledger_store import LedgerStore
from trading.market import Market
from trading.shell import TradingShell


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the interactive stock trading simulator.",
    )
    parser.add_argument(
        "--config",
        default=None,
        type=str,
        help="Path to the YAML configuration file (default: built-in settings).",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        type=str,
        help="Directory for the ledger files (overrides ledger.data_dir).",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        type=str,
        help="Ledger file name prefix (overrides ledger.prefix).",
    )
    parser.add_argument(
        "--seed",
        default=None,
        type=int,
        help="Seed for market price ticks (overrides market.seed).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser.parse_args(argv)


def _setup_logging(level: str) -> None:
    """Configure root logger with a clean format."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_config(args: argparse.Namespace) -> TradingConfig:
    """Load the config file (if any) and apply command-line overrides."""
    config = TradingConfig.from_yaml(args.config) if args.config else TradingConfig()
    if args.data_dir is not None:
        config.ledger.data_dir = args.data_dir
    if args.prefix is not None:
        config.ledger.prefix = args.prefix
    if args.seed is not None:
        config.market.seed = args.seed
    return config


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    _setup_logging(args.log_level)

    logger = logging.getLogger(__name__)
    config = build_config(args)
    logger.info("Config loaded: %d stock(s), ledger '%s'.", len(config.market.stocks), config.ledger.prefix)

    market = Market.from_config(config.market)
    account = Account(name=config.account.name, initial_cash=config.account.initial_cash)
    store = LedgerStore(config.ledger.data_dir, config.ledger.prefix)

    TradingShell(
        account,
        market,
        store,
        prefix=config.ledger.prefix,
        currency=config.currency_symbol,
    ).run()


if __name__ == "__main__":
    main()
