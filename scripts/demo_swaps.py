#!/usr/bin/env python3
"""Deploy two assets and a pool, seed it, and replay a sequence of trades.

Prints the reserves, the constant product and the average exchange rate
after every trade. Trades are given as SIDE:AMOUNT in whole units, where
SIDE is A or B (the asset sold).

Example:
    python scripts/demo_swaps.py --seed 1000 1000 --trades A:50 A:10 A:40 B:100 A:10
"""

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

import structlog

sys.path.insert(0, str(Path(__file__).parent.parent))

from pairswap.assets import Token
from pairswap.constants import WAD
from pairswap.errors import PairswapError
from pairswap.routing import Router

logger = structlog.get_logger()

DEPLOYER = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"
APPLES = "0xe7f1725e7734ce288f8367e1bb143e90bb3f0512"
ORANGES = "0x9fe46736679d2d9a65f0992f2272de9f3c7fa6e0"


def parse_trade(value: str) -> tuple[str, int]:
    side, _, amount = value.partition(":")
    side = side.upper()
    if side not in ("A", "B") or not amount.isdigit():
        raise argparse.ArgumentTypeError(f"Trade must look like A:50 or B:100, got {value!r}")
    return side, int(amount)


def fmt(amount: int) -> str:
    """Base units as whole units with 3 decimals."""
    return f"{Decimal(amount) / WAD:,.3f}"


def main() -> int:
    parser = argparse.ArgumentParser(description="Replay trades against a fresh pool")
    parser.add_argument(
        "--supply", type=int, default=10_000, help="Initial supply of each asset (whole units)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        nargs=2,
        default=(1000, 1000),
        metavar=("A", "B"),
        help="Initial liquidity (whole units)",
    )
    parser.add_argument(
        "--trades",
        type=parse_trade,
        nargs="*",
        default=[("A", 50), ("A", 10), ("A", 40), ("B", 100), ("A", 10)],
        help="Trades as SIDE:AMOUNT in whole units",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    apples = Token(APPLES, "Apples", "APPLE", args.supply * WAD, DEPLOYER)
    oranges = Token(ORANGES, "Oranges", "ORANGE", args.supply * WAD, DEPLOYER)

    router = Router()
    pair_id = router.create_pool(apples, oranges)
    pool_address = router.get_pool_address(pair_id)
    print(f"Pool for Apples/Oranges deployed to: {pool_address}")
    print(f"Pair id: {pair_id}")

    apples.approve(DEPLOYER, pool_address, args.supply * WAD)
    oranges.approve(DEPLOYER, pool_address, args.supply * WAD)

    seed_a, seed_b = args.seed
    liquidity = router.add_liquidity(DEPLOYER, pair_id, seed_a * WAD, seed_b * WAD)
    pool = router.get_pool(pair_id)
    print(f"Seeded {seed_a}/{seed_b}, minted {liquidity} liquidity")
    print()
    print(f"{'Trade':<28}{'reserve A':>16}{'reserve B':>16}{'A * B':>20}{'rate B/A':>12}")
    print("-" * 92)

    for side, amount in args.trades:
        amount_in = amount * WAD
        try:
            if side == "A":
                amount_a, amount_b = router.swap(DEPLOYER, pair_id, amount_in, 0)
                label = f"{amount} A for {fmt(amount_b)} B"
            else:
                amount_a, amount_b = router.swap(DEPLOYER, pair_id, 0, amount_in)
                label = f"{amount} B for {fmt(amount_a)} A"
        except PairswapError as exc:
            print(f"{side}:{amount} rejected: {exc.message}")
            continue

        product = Decimal(pool.reserve_a) * Decimal(pool.reserve_b) / WAD / WAD
        rate = Decimal(amount_b) / Decimal(amount_a)
        print(
            f"{label:<28}{fmt(pool.reserve_a):>16}{fmt(pool.reserve_b):>16}"
            f"{product:>20,.0f}{rate:>12.3f}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
