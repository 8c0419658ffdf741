"""Protean Engine runner for the review service.

Starts the Engine that consumes events asynchronously in production:
- ReviewValidationHandler settles submitted reviews
- SettlementNotificationHandler notifies submitters
- DirectoryEventsHandler keeps business categories current

Usage:
    python src/server.py
    python src/server.py --test-mode   # Drain pending events and exit
"""

import argparse
import asyncio

from protean.server.engine import Engine


def _get_domain():
    from reviews.domain import reviews

    reviews.init()
    return reviews


async def run(test_mode: bool = False):
    engine = Engine(_get_domain(), test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="Review service Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending events once and exit",
    )
    args = parser.parse_args()

    asyncio.run(run(test_mode=args.test_mode))


if __name__ == "__main__":
    main()
