"""Entry point for the dashboard: python -m dependabot_tracker"""

import curses
import functools
import sys

from pydantic import ValidationError

from dependabot_tracker.errors import WorkerLostError
from dependabot_tracker.logging.logger import setup_logger
from dependabot_tracker.pipeline import refresh_snapshot
from dependabot_tracker.session import Session
from dependabot_tracker.settings import load_settings
from dependabot_tracker.snapshot import load_repositories, snapshot_timestamp
from dependabot_tracker.tui.loop import run


def main() -> None:
    try:
        settings = load_settings()
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        print(f"Invalid configuration ({fields}): PAT and GH_USERNAME must be set.", file=sys.stderr)
        sys.exit(1)

    logger = setup_logger(level=settings.log_level, log_file=settings.log_file)
    logger.info("Starting dependabot-tracker for %s", settings.username)

    session = Session(
        load_repositories(settings.snapshot_path),
        refresher=functools.partial(refresh_snapshot, settings.model_copy()),
        last_updated=snapshot_timestamp(settings.snapshot_path),
    )

    try:
        curses.wrapper(run, session, settings.poll_interval)
    except WorkerLostError as e:
        logger.critical("Session terminated: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")


if __name__ == "__main__":
    main()
