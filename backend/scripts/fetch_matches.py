"""
Run the match ingestion pipeline once.

Intended for schedulers (cron, systemd timers) as well as manual runs:

    python scripts/fetch_matches.py
    python scripts/fetch_matches.py --date 2025-03-01
"""

import argparse
import asyncio
import logging
import os
import sys
from datetime import date

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from matchcast.config import get_settings
from matchcast.database import init_db, session_scope
from matchcast.exceptions import MatchcastError
from matchcast.services import IngestionService


async def run(target_date: date | None) -> int:
    """Run the pipeline and print its summary. Returns the exit code."""
    await init_db()

    async with session_scope() as session:
        service = IngestionService(session)
        try:
            summary = await service.run(target_date)
        except MatchcastError as e:
            print(f"Error: {e.message}")
            return 1

    print(f"Processed {summary.matches_processed} matches, "
          f"generated {summary.analyses_generated} analyses, "
          f"removed {summary.deleted_count} old predictions "
          f"in {summary.execution_time_ms}ms")
    for name in summary.matches:
        print(f"  - {name}")
    if summary.stopped_early:
        print("Stopped early: LLM credits exhausted")
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Fetch fixtures and generate predictions")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Fixture date as YYYY-MM-DD (default: today)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(run(args.date)))


if __name__ == "__main__":
    main()
