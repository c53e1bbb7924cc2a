#!/usr/bin/env python3
"""Print the portfolio dashboard for a storage location.

Reads the four collections through the storage gateway (seeding the
demonstration data on first use) and prints headline figures, the monthly
series and profit per apartment. ``--generate`` first adds a synthetic
portfolio on top of whatever is stored.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from prop_ledger.analytics import build_dashboard, format_currency
from prop_ledger.config import LedgerConfig
from prop_ledger.exceptions import LedgerError
from prop_ledger.logging import setup_logging
from prop_ledger.scenarios import PortfolioScenario
from prop_ledger.store import StorageGateway

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the rental portfolio dashboard")
    parser.add_argument("--data-dir", type=Path, help="Directory holding the collection files")
    parser.add_argument("--memory", action="store_true", help="Use a throwaway in-memory store")
    parser.add_argument("--generate", type=int, metavar="N", default=0, help="Add N synthetic apartments first")
    parser.add_argument("--months", type=int, default=6, help="Months of history for --generate")
    parser.add_argument("--seed", type=int, help="Random seed for --generate")
    parser.add_argument("--no-demo", action="store_true", help="Do not seed demonstration data")
    parser.add_argument(
        "--encounter-order",
        action="store_true",
        help="List months in the order first seen instead of chronologically",
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--log-format", choices=["standard", "json"], help="Log output format")
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> LedgerConfig:
    config = LedgerConfig.from_env()
    if args.memory:
        config.storage.backend = "memory"
    if args.data_dir is not None:
        config.storage.data_dir = args.data_dir
    if args.no_demo:
        config.seed_demo = False
    if args.encounter_order:
        config.chronological_months = False
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format
    return config


def print_dashboard(gateway: StorageGateway) -> None:
    dashboard = build_dashboard(gateway)
    stats = dashboard.stats
    occ = dashboard.occupancy

    print(f"\n{'=' * 60}")
    print("Portfolio Dashboard")
    print("=" * 60)
    print(f"  Total income:     {format_currency(stats.total_income)}")
    print(f"  Total expenses:   {format_currency(stats.total_expenses)}")
    print(f"  Net profit:       {format_currency(stats.net_profit)}")
    print(f"  Family support:   {format_currency(stats.family_support_allocation)} allocated, "
          f"{format_currency(stats.family_support_expenses)} paid")
    print(f"  Occupancy:        {occ.rate:.0f}% ({occ.occupied_count}/{occ.total_apartments}, "
          f"{occ.total_tenants} tenants)")

    print("\nMonthly")
    for bucket in dashboard.monthly:
        print(f"  {bucket.label:<10} income {format_currency(bucket.income):>10}  "
              f"expenses {format_currency(bucket.expenses):>10}")

    print("\nProfit by apartment")
    for row in dashboard.apartment_profit:
        print(f"  {row.name:<30} {format_currency(row.profit):>10}")


def main() -> int:
    args = parse_args()
    try:
        config = build_config(args)
        setup_logging(config.log_level, config.log_format)
        gateway = StorageGateway.from_config(config)

        if args.generate:
            PortfolioScenario(
                gateway,
                num_apartments=args.generate,
                months=args.months,
                seed=config.seed,
            ).generate()

        print_dashboard(gateway)
    except LedgerError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
