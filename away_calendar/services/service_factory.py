# File: away_calendar/services/service_factory.py

from typing import Tuple
from googleapiclient.discovery import Resource

from away_calendar.services.calendar_service import GoogleCalendarService
from away_calendar.services.directory_service import GoogleDirectoryService


class ServiceFactory:
    """Factory for creating service instances."""

    @staticmethod
    def create_services(
        calendar_service: Resource,
        directory_service: Resource
    ) -> Tuple[GoogleCalendarService, GoogleDirectoryService]:
        """
        Create service wrapper instances.

        Args:
            calendar_service: Authenticated calendar API resource
            directory_service: Authenticated admin directory API resource

        Returns:
            Tuple of (calendar_service, directory_service)
        """
        return (
            GoogleCalendarService(calendar_service),
            GoogleDirectoryService(directory_service)
        )
