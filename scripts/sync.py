"""
Hourly sync entry point.
Point cron / Task Scheduler at this file to run once per hour, e.g.

    0 * * * *  cd /path/to/away-calendar && python scripts/sync.py

Make sure you have run 'python scripts/setup.py' at least once.
"""

import sys
import time
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from away_calendar.core.orchestrator import OrchestratorFactory
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


def main() -> int:
    """
    Run a single sync cycle.

    Returns:
        Exit code (0 when the cycle committed, 1 otherwise)
    """
    start_time = time.time()

    try:
        orchestrator = OrchestratorFactory.create()
        report = orchestrator.run_cycle()

        if report.committed:
            logger.info(
                f"Sync committed: {report.imported} imported, {report.skipped} skipped, "
                f"{len(report.failed_pairs)} failed searches"
            )
            return 0

        logger.error(f"Sync aborted: {report.error}")
        return 1

    except ValueError as e:
        logger.error("Invalid configuration", exc_info=True)
        logger.error(str(e))
        return 1

    except ConnectionError as e:
        logger.error("Authentication failed", exc_info=True)
        logger.error(str(e))
        return 1

    except KeyboardInterrupt:
        logger.warning("Sync interrupted by user")
        return 1

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
