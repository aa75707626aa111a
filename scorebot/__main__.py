"""Module entry point. Allows ``python -m scorebot``."""

import argparse
import asyncio
import sys


def run_scrape() -> None:
    """Run one scrape and print the saved scores."""
    from scorebot.etl.aggregation import ScoreAggregator

    aggregator = ScoreAggregator()
    snapshot = asyncio.run(aggregator.run())

    print(f"\n💾 Saved to {aggregator.store.path}")
    _print_snapshot(snapshot)


def show_scores() -> None:
    """Print the last saved snapshot."""
    from scorebot.api.schemas import NO_DATA_MESSAGE
    from scorebot.etl.loaders import SnapshotStore

    snapshot = SnapshotStore().read()
    if snapshot is None:
        print(NO_DATA_MESSAGE)
        return
    _print_snapshot(snapshot)


def run_api() -> None:
    """Start the FastAPI server."""
    import uvicorn

    from scorebot.settings import settings

    print("🌐 Starting API...")
    uvicorn.run(
        "scorebot.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )


def _print_snapshot(snapshot: dict) -> None:
    """Print a snapshot as a fixed-width table."""
    header = f"{'Title':<20} {'IMDb':>8} {'RT':>8} {'MC':>8}"
    print(header)
    print("-" * len(header))
    for title, scores in snapshot.items():
        imdb, rt, mc = (scores.get(key) or "-" for key in ("imdb", "rottenTomatoes", "metaCritic"))
        print(f"{title:<20} {imdb:>8} {rt:>8} {mc:>8}")


def main() -> None:
    """Main CLI."""
    parser = argparse.ArgumentParser(
        description="ScoreBot - IMDb / Rotten Tomatoes / Metacritic score scraper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m scorebot scrape        # Scrape now and save the snapshot
  python -m scorebot show          # Print the saved snapshot
  python -m scorebot api           # Start the API with the hourly scheduler
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")
    subparsers.add_parser("scrape", help="Scrape all sources once")
    subparsers.add_parser("show", help="Print the saved snapshot")
    subparsers.add_parser("api", help="Start the FastAPI server")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "scrape": run_scrape,
        "show": show_scores,
        "api": run_api,
    }

    try:
        commands[args.command]()
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted")
        sys.exit(130)
    except Exception as e:
        print(f"\n❌ ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
