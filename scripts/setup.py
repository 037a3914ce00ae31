"""
One-time setup for Away Calendar.

Authenticates with Google, registers the hourly sync trigger and runs the
first sync immediately. Run with --remove to unregister the trigger.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from away_calendar.auth.google_auth import create_initial_token
from away_calendar.core.config_manager import Config
from away_calendar.core.orchestrator import OrchestratorFactory
from away_calendar.core.scheduler import TriggerRegistry
from away_calendar.models.errors import TriggerAlreadyInstalledError, TriggerNotInstalledError
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)

CRON_HINT = "0 */{hours} * * *  cd {root} && {python} scripts/sync.py"


def remove_trigger(registry: TriggerRegistry) -> int:
    try:
        registry.remove()
    except TriggerNotInstalledError as e:
        print(str(e))
        return 1
    print("Trigger removed. Remember to delete the matching cron / Task Scheduler entry.")
    return 0


def main() -> int:
    """Main setup wizard."""
    parser = argparse.ArgumentParser(description="Set up the hourly Away Calendar sync")
    parser.add_argument("--remove", action="store_true", help="Unregister the sync trigger")
    args = parser.parse_args()

    registry = TriggerRegistry(Config.STATE_DB_FILE)
    if args.remove:
        return remove_trigger(registry)

    print("Setting up Away Calendar...")
    print("=" * 60)

    # Step 1: Configuration
    print("\nStep 1: Checking configuration")
    if not Config.validate():
        print("Fix the settings above in your .env file and run setup again.")
        return 1

    # Step 2: Google Authentication
    print("\nStep 2: Google Cloud Authentication")
    if not Config.TOKEN_FILE.exists():
        if not create_initial_token():
            print("Google authentication failed.")
            return 1
    else:
        print("Existing token.json found")

    # Step 3: Trigger
    print("\nStep 3: Registering the hourly trigger")
    try:
        registry.install(Config.SYNC_INTERVAL_HOURS)
    except TriggerAlreadyInstalledError:
        logger.error("Triggers are already set up; run with --remove first to register again.")
        raise

    print("Add this line to your crontab (crontab -e):")
    print("  " + CRON_HINT.format(
        hours=Config.SYNC_INTERVAL_HOURS, root=PROJECT_ROOT, python=sys.executable
    ))

    # Step 4: First sync
    print("\nStep 4: Running the first sync")
    report = OrchestratorFactory.create().run_cycle()

    print("=" * 60)
    if report.committed:
        print(f"Setup complete! Imported {report.imported} events.")
        return 0

    print(f"Setup finished, but the first sync was aborted: {report.error}")
    return 1


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nSetup cancelled.")
        sys.exit(1)
    except TriggerAlreadyInstalledError as e:
        print(f"\n{e}")
        sys.exit(1)
    except Exception as e:
        print(f"\nUnexpected error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
