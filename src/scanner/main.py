import argparse
import logging
import time
from typing import Optional, Sequence

from tqdm import tqdm

from scanner.config import REFRESH_INTERVAL, WINDOW_LENGTH, SimulationConfig
from scanner.market_simulator import MarketSimulator
from scanner.models import InstrumentState
from scanner.reporting import summarize

logger = logging.getLogger(__name__)


def format_table(ranked: Sequence[InstrumentState]) -> str:
    lines = [
        f"{'Symbol':<8} {'Price':>12} {'Change':>10} {'Chg %':>8} "
        f"{'Buy At':>12} {'Sell At':>12} {'Trend':<8}",
        "-" * 80,
    ]
    for s in ranked:
        lines.append(
            f"{s.symbol:<8} {s.price:>12,.2f} {s.change:>+10.2f} "
            f"{s.change_percent:>+7.2f}% {s.best_buy:>12,.2f} "
            f"{s.best_sell:>12,.2f} {s.trend.value.upper():<8}"
        )
    return "\n".join(lines)


def print_report(simulator: MarketSimulator) -> None:
    tick_count, last_update, ranked = simulator.view()
    summary = summarize(ranked)

    print("\n" + "=" * 80)
    print(f"MARKET SCANNER - tick {tick_count} - {last_update:%H:%M:%S} UTC")
    print("=" * 80)
    print(format_table(ranked))
    print("=" * 80)
    print(
        f"Tracked: {summary.tracked}  Bullish: {summary.bullish}  "
        f"Bearish: {summary.bearish}  Top mover: {summary.top_mover or '---'}"
    )


def run_headless(simulator: MarketSimulator, n_ticks: int) -> None:
    for _ in tqdm(range(n_ticks), desc="ticks", unit=" tick", ncols=80):
        simulator.step()
    print_report(simulator)


def run_live(simulator: MarketSimulator) -> bool:
    """Print a report after every tick until interrupted; False if ticking died"""
    print_report(simulator)
    simulator.start()
    shown = simulator.tick_count
    try:
        while simulator.scheduler.is_running:
            time.sleep(0.1)
            if simulator.tick_count != shown:
                shown = simulator.tick_count
                print_report(simulator)
        logger.error("Scheduler stopped unexpectedly after tick %d", shown)
        return False
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping")
        return True
    finally:
        simulator.stop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulated micro futures scanner with support/resistance levels"
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Run this many ticks without waiting, print the result and exit",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=REFRESH_INTERVAL,
        help="Seconds between ticks in live mode",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--window-length",
        type=int,
        default=WINDOW_LENGTH,
        help="Number of price samples kept per instrument",
    )
    parser.add_argument(
        "--volatility",
        type=float,
        default=None,
        help="Override the volatility of every initial price window",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.ticks is not None and args.ticks < 0:
        logger.error("--ticks must be non-negative, got %d", args.ticks)
        return 2

    try:
        config = SimulationConfig(
            window_length=args.window_length,
            volatility=args.volatility,
            refresh_interval=args.interval,
            seed=args.seed,
        )
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    simulator = MarketSimulator(config=config)
    if args.ticks is not None:
        run_headless(simulator, args.ticks)
    elif not run_live(simulator):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
