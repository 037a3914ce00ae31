# File: away_calendar/auth/google_auth.py
"""
Google API authentication module.
Handles OAuth2 flow and credential management.
"""

from typing import Optional, Tuple
import httplib2
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build, Resource
from googleapiclient.errors import HttpError

from away_calendar.core.config_manager import Config
from away_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)


def _authenticate() -> Optional[Credentials]:
    """
    Internal helper to load or refresh credentials.

    Returns:
        Credentials object or None if authentication fails
    """
    creds = None

    if Config.TOKEN_FILE.exists():
        logger.debug(f"Loading existing token from {Config.TOKEN_FILE}")
        creds = Credentials.from_authorized_user_file(
            str(Config.TOKEN_FILE),
            Config.GOOGLE_SCOPES
        )

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            logger.info("Refreshing expired credentials")
            try:
                creds.refresh(Request())
                logger.info("Credentials refreshed successfully")
            except Exception as e:
                logger.error(f"Error refreshing token: {e}", exc_info=True)
                logger.warning("Deleting invalid token file")
                Config.TOKEN_FILE.unlink(missing_ok=True)
                return None
        else:
            logger.warning("No valid credentials found")
            return None

        logger.debug("Saving refreshed credentials")
        with open(Config.TOKEN_FILE, "w") as token_file:
            token_file.write(creds.to_json())

    return creds


def create_initial_token() -> bool:
    """
    Forces the interactive, browser-based auth flow.
    Called by 'scripts/setup.py' when no token exists yet.

    Returns:
        True if authentication successful, False otherwise
    """
    logger.info("Starting interactive authentication flow")

    if not Config.CREDENTIALS_FILE.exists():
        logger.error(f"credentials.json not found at {Config.CREDENTIALS_FILE}")
        logger.error("Please download it from Google Cloud Console and place it in the project root")
        return False

    try:
        flow = InstalledAppFlow.from_client_secrets_file(
            str(Config.CREDENTIALS_FILE),
            Config.GOOGLE_SCOPES
        )
        logger.info("Opening browser for authentication...")
        creds = flow.run_local_server(port=0)

        with open(Config.TOKEN_FILE, "w") as token_file:
            token_file.write(creds.to_json())

        logger.info(f"Authentication successful! Token saved to {Config.TOKEN_FILE}")
        return True

    except Exception as e:
        logger.error(f"Authentication flow failed: {e}", exc_info=True)
        return False


def _authorized_http(creds: Credentials, timeout: int) -> AuthorizedHttp:
    """HTTP transport whose every request gives up after `timeout` seconds."""
    return AuthorizedHttp(creds, http=httplib2.Http(timeout=timeout))


def get_google_services(
    timeout: int = Config.REQUEST_TIMEOUT_SECONDS
) -> Tuple[Optional[Resource], Optional[Resource]]:
    """
    Main function to get authenticated service objects.
    Uses existing 'token.json' if possible.

    Args:
        timeout: Per-request timeout in seconds

    Returns:
        Tuple of (calendar_service, directory_service)
        Returns (None, None) if authentication fails
    """
    logger.info("Initializing Google API services")

    creds = _authenticate()

    if not creds:
        logger.error("Authentication failed")
        logger.error("token.json is missing or invalid")
        logger.error("Please run 'python scripts/setup.py' to authenticate")
        return None, None

    try:
        # Each resource gets its own transport; httplib2.Http is not thread safe
        logger.debug("Building Calendar API service")
        calendar_service = build(
            "calendar", "v3",
            http=_authorized_http(creds, timeout),
            cache_discovery=False
        )

        logger.debug("Building Admin Directory API service")
        directory_service = build(
            "admin", "directory_v1",
            http=_authorized_http(creds, timeout),
            cache_discovery=False
        )

        logger.info("All Google API services initialized successfully")
        return calendar_service, directory_service

    except HttpError as err:
        logger.error(f"HTTP error occurred building services: {err}", exc_info=True)
        return None, None
    except Exception as err:
        logger.error(f"Unexpected error building services: {err}", exc_info=True)
        return None, None
