# File: away_calendar/core/orchestrator.py
"""
Main orchestrator module for Away Calendar.
Runs one sync cycle: roster -> (discovery x filter) -> import.

The cycle must not run concurrently with itself; the host scheduler that
fires the hourly trigger is responsible for that.
"""

import datetime
from typing import Callable, List, Optional, Protocol

from away_calendar.core.config_manager import Config
from away_calendar.core.run_state import RunStateStore
from away_calendar.auth.google_auth import get_google_services
from away_calendar.models.enums import CycleState
from away_calendar.models.errors import RosterResolutionError
from away_calendar.models.sync import CycleReport, SearchWindow
from away_calendar.processors.event_discovery import EventDiscovery
from away_calendar.processors.event_filter import should_include
from away_calendar.processors.event_importer import EventImporter
from away_calendar.services.service_factory import ServiceFactory
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


class MembershipProvider(Protocol):
    def list_members(self, group_email: str) -> List[str]: ...


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class SyncOrchestrator:
    """
    Drives a full sync cycle over every group member and keyword.

    State machine: IDLE -> RUNNING -> COMMITTED, or RUNNING -> ABORTED
    when the roster cannot be resolved. lastRun is written only on commit.
    """

    def __init__(
        self,
        membership: MembershipProvider,
        discovery: EventDiscovery,
        importer: EventImporter,
        run_state: RunStateStore,
        group_email: str = Config.GROUP_EMAIL,
        keywords: Optional[List[str]] = None,
        months_in_advance: int = Config.MONTHS_IN_ADVANCE,
        clock: Callable[[], datetime.datetime] = _utc_now
    ):
        self.membership = membership
        self.discovery = discovery
        self.importer = importer
        self.run_state = run_state
        self.group_email = group_email
        self.keywords = list(keywords if keywords is not None else Config.KEYWORDS)
        self.months_in_advance = months_in_advance
        self.clock = clock
        self.state = CycleState.IDLE

    def run_cycle(self) -> CycleReport:
        """
        Execute one sync cycle.

        Returns:
            CycleReport; its state is COMMITTED on success and ABORTED when
            the roster could not be resolved
        """
        cycle_start = self.clock()
        report = CycleReport(started_at=cycle_start)
        self._transition(report, CycleState.RUNNING)

        window = SearchWindow.from_now(cycle_start, self.months_in_advance)
        last_run = self.run_state.get_last_run()
        # The DST approximation follows the local calendar month
        reference_date = cycle_start.astimezone().date()

        logger.info("=" * 60)
        logger.info(f"Starting sync cycle at {cycle_start.isoformat()}")
        logger.info(
            f"Window {window.start.isoformat()} -> {window.end.isoformat()}, "
            f"last run: {last_run.isoformat() if last_run else 'never'}"
        )

        try:
            roster = self._resolve_roster()
        except RosterResolutionError as e:
            logger.error(f"Aborting sync cycle: {e}", exc_info=True)
            report.error = str(e)
            self._transition(report, CycleState.ABORTED)
            return report

        report.roster_size = len(roster)

        for identity in roster:
            for keyword in self.keywords:
                result = self.discovery.discover(
                    identity, keyword, window.start, window.end, since=last_run
                )
                if not result.ok:
                    report.failed_pairs.append(result)
                    continue

                for event in result.events:
                    if not should_include(identity, keyword, event):
                        continue
                    outcome = self.importer.import_event(identity, event, reference_date)
                    if outcome.is_success():
                        report.imported += 1
                    else:
                        report.skipped += 1

        self.run_state.set_last_run(cycle_start)
        self._transition(report, CycleState.COMMITTED)

        if report.failed_pairs:
            logger.warning(f"{len(report.failed_pairs)} member/keyword searches failed")
        logger.info(f"Imported {report.imported} events")
        logger.info("=" * 60)
        return report

    def _resolve_roster(self) -> List[str]:
        try:
            roster = list(self.membership.list_members(self.group_email))
        except Exception as e:
            raise RosterResolutionError(self.group_email, e) from e
        logger.info(f"Resolved {len(roster)} members of {self.group_email}")
        return roster

    def _transition(self, report: CycleReport, state: CycleState) -> None:
        logger.debug(f"Cycle state {self.state.value} -> {state.value}")
        self.state = state
        report.state = state


class OrchestratorFactory:
    """Factory for creating SyncOrchestrator instances with dependency injection."""

    @staticmethod
    def create() -> SyncOrchestrator:
        """
        Create a fully initialized SyncOrchestrator.

        Returns:
            SyncOrchestrator ready to run

        Raises:
            ValueError: If configuration is invalid
            ConnectionError: If authentication fails
        """
        logger.info("Creating SyncOrchestrator via factory")

        if not Config.validate():
            raise ValueError(
                "Configuration validation failed. "
                "Please check your .env file and run 'python scripts/setup.py'."
            )

        raw_services = get_google_services()
        if not all(raw_services):
            raise ConnectionError(
                "Google authentication failed. Run 'python scripts/setup.py' first."
            )

        calendar_service, directory_service = ServiceFactory.create_services(*raw_services)

        return SyncOrchestrator(
            membership=directory_service,
            discovery=EventDiscovery(calendar_service),
            importer=EventImporter(calendar_service, Config.TEAM_CALENDAR_ID),
            run_state=RunStateStore(Config.STATE_DB_FILE)
        )
