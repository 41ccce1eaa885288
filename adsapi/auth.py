"""
OAuth2 authentication for SOAP requests.

Handles refresh-token credentials and service account credentials, and produces
the Authorization header attached to every request.
"""

import json
import logging

import google.oauth2.service_account
from googleads import oauth2

from adsapi.core.config import OAuth2Config
from adsapi.core.errors import OAuth2VerificationRequired

logger = logging.getLogger(__name__)


class AuthManager:
    """Manages OAuth2 credentials for one API."""

    def __init__(self, config: OAuth2Config, scope: str):
        """Initialize authentication manager with configuration.

        Args:
            config: OAuth2 configuration (refresh token or service account)
            scope: OAuth2 scope of the API, e.g. https://www.googleapis.com/auth/adwords
        """
        self.config = config
        self.scope = scope
        self.refresh_token = config.refresh_token
        self.service_account_json = config.service_account_json
        self.key_file = config.service_account_key_file
        self._credentials = None

    def get_credentials(self):
        """Get (and cache) authenticated credentials.

        Returns:
            googleads OAuth2 client usable to create Authorization headers

        Raises:
            OAuth2VerificationRequired: If no usable credentials are configured
        """
        if self._credentials is None:
            if self.refresh_token:
                self._credentials = self._get_oauth_credentials()
            elif self.service_account_json or self.key_file:
                self._credentials = self._get_service_account_credentials()
            else:
                raise OAuth2VerificationRequired(
                    "OAuth2 credentials are not configured: set a refresh token or a service account key"
                )
        return self._credentials

    def _get_oauth_credentials(self):
        """Get OAuth2 credentials from the client ID/secret and refresh token."""
        if not self.config.client_id or not self.config.client_secret:
            raise OAuth2VerificationRequired("OAuth2 client_id and client_secret are required with a refresh token")

        return oauth2.GoogleRefreshTokenClient(
            client_id=self.config.client_id,
            client_secret=self.config.client_secret,
            refresh_token=self.refresh_token,
        )

    def _get_service_account_credentials(self):
        """Get service account credentials from JSON string or file.

        Returns:
            GoogleCredentialsClient wrapping the service account credentials
        """
        if self.service_account_json:
            try:
                key_data = json.loads(self.service_account_json)
            except json.JSONDecodeError as e:
                raise OAuth2VerificationRequired(f"Invalid service account JSON: {e}") from e
            credentials = google.oauth2.service_account.Credentials.from_service_account_info(
                key_data, scopes=[self.scope]
            )
            logger.info("Using service account credentials from JSON string")
        else:
            credentials = google.oauth2.service_account.Credentials.from_service_account_file(
                self.key_file, scopes=[self.scope]
            )
            logger.info(f"Using service account credentials from file: {self.key_file}")

        return oauth2.GoogleCredentialsClient(credentials)

    def create_http_header(self) -> dict[str, str]:
        """Authorization header for the next request (refreshing the token if needed)."""
        try:
            return self.get_credentials().CreateHttpHeader()
        except OAuth2VerificationRequired:
            raise
        except Exception as e:
            logger.error(f"Error refreshing OAuth2 access token: {e}")
            raise OAuth2VerificationRequired(f"Unable to obtain an OAuth2 access token: {e}") from e

    def is_oauth_configured(self) -> bool:
        return self.refresh_token is not None

    def is_service_account_configured(self) -> bool:
        return self.service_account_json is not None or self.key_file is not None

    def get_auth_method(self) -> str:
        """Get the current authentication method name."""
        if self.is_oauth_configured():
            return "oauth"
        elif self.is_service_account_configured():
            return "service_account"
        else:
            return "none"
