# File: away_calendar/services/directory_service.py

from typing import List
from googleapiclient.discovery import Resource

from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


class GoogleDirectoryService:
    """Resolves Google Group membership via the Admin SDK Directory API."""

    # Directory API maximum page size for members.list
    PAGE_SIZE = 200

    def __init__(self, directory_service: Resource):
        """
        Initialize directory service.

        Args:
            directory_service: Authenticated Admin Directory API resource
        """
        self.service = directory_service

    def list_members(self, group_email: str) -> List[str]:
        """
        List the email addresses of the users in a group.

        Nested groups and customer entries are skipped. Errors propagate:
        a partial roster is never returned.

        Args:
            group_email: Email address of the Google Group

        Returns:
            Member emails in directory order
        """
        logger.info(f"Fetching members of group {group_email}")

        members: List[str] = []
        page_token = None

        while True:
            kwargs = {
                "groupKey": group_email,
                "maxResults": self.PAGE_SIZE,
            }
            if page_token:
                kwargs["pageToken"] = page_token

            response = self.service.members().list(**kwargs).execute(num_retries=0)

            for member in response.get("members", []):
                if member.get("type", "USER") != "USER":
                    logger.debug(f"Skipping non-user member {member.get('email')}")
                    continue
                if member.get("email"):
                    members.append(member["email"])

            page_token = response.get("nextPageToken")
            if not page_token:
                break

        logger.info(f"Group {group_email} has {len(members)} user members")
        return members
