"""
OAuth2 authentication for Google Docs Suggestions MCP Server.

Supports two authentication methods:
1. Service account authentication - used when SERVICE_ACCOUNT_PATH is set
2. OAuth2 user credentials - a stored token, or a loopback flow on first run
"""

import os
from pathlib import Path

from google.oauth2.credentials import Credentials
from google.oauth2.service_account import Credentials as ServiceAccountCredentials
from google_auth_oauthlib.flow import InstalledAppFlow
from google.auth.transport.requests import Request
from googleapiclient.discovery import build

from gdocs_suggestions_mcp.types import AuthError
from gdocs_suggestions_mcp.utils import log

# Reading suggestions never modifies the document
SCOPES = ["https://www.googleapis.com/auth/documents.readonly"]

DEFAULT_OAUTH_PORT = 3000


def get_credentials_dir() -> Path:
    """
    Resolve the directory holding credentials.json and token.json.

    In Docker: /workspace/credentials/
    In local dev: ./credentials/ under the project root
    """
    explicit_dir = os.environ.get("GOOGLE_CREDENTIALS_DIR")
    if explicit_dir:
        return Path(explicit_dir).expanduser()
    if os.environ.get("DOCKER_ENV"):
        return Path("/workspace/credentials")
    return Path(__file__).parent.parent.parent / "credentials"


def get_oauth_port() -> int:
    """Loopback port used for the first-time OAuth flow."""
    return int(os.environ.get("OAUTH_PORT", DEFAULT_OAUTH_PORT))


def _authorize_with_service_account(service_account_path: str) -> ServiceAccountCredentials:
    """
    Authorize using a service account key file.

    Returns:
        Service account credentials

    Raises:
        AuthError: If service account file not found or invalid
    """
    path = Path(service_account_path)
    if not path.exists():
        raise AuthError(
            f"Service account key file not found at path: {service_account_path}"
        )

    try:
        credentials = ServiceAccountCredentials.from_service_account_file(
            str(path), scopes=SCOPES
        )
    except (ValueError, OSError) as e:
        log(f"Error loading service account key: {e}")
        raise AuthError(
            "Failed to authorize using the service account. "
            "Ensure the key file is valid and the path is correct."
        ) from e

    log("Service Account authentication successful!")
    return credentials


def _load_saved_credentials(token_path: Path) -> Credentials | None:
    """
    Load saved OAuth credentials, refreshing them when expired.

    Returns:
        Credentials if found and usable, None otherwise
    """
    if not token_path.exists():
        return None

    try:
        credentials = Credentials.from_authorized_user_file(str(token_path), SCOPES)
        if credentials.valid:
            return credentials
        if credentials.expired and credentials.refresh_token:
            credentials.refresh(Request())
            _save_credentials(credentials, token_path)
            return credentials
        return None
    except Exception as e:
        log(f"Error loading saved credentials: {e}")
        return None


def _save_credentials(credentials: Credentials, token_path: Path) -> None:
    """Save OAuth credentials to the token file."""
    try:
        token_path.write_text(credentials.to_json())
        log(f"Token stored to {token_path}")
    except OSError as e:
        log(f"Error saving credentials: {e}")


def _authenticate(credentials_dir: Path) -> Credentials:
    """
    Perform OAuth2 authentication via loopback flow.

    Raises:
        AuthError: If client secrets are missing or the flow fails
    """
    secrets_path = credentials_dir / "credentials.json"
    if not secrets_path.exists():
        raise AuthError(f"Credentials file not found at {secrets_path}")

    port = get_oauth_port()
    log(f"Using loopback OAuth flow on http://localhost:{port}")

    flow = InstalledAppFlow.from_client_secrets_file(str(secrets_path), scopes=SCOPES)
    try:
        credentials = flow.run_local_server(
            port=port,
            open_browser=False,
            authorization_prompt_message="Authorize this app by visiting this URL: {url}",
            access_type="offline",
        )
    except Exception as e:
        log(f"Error retrieving access token: {e}")
        raise AuthError(f"Authentication failed: {e}") from e

    if credentials.refresh_token:
        _save_credentials(credentials, credentials_dir / "token.json")
    else:
        log("Did not receive refresh token. Token might expire.")
    log("Authentication successful!")
    return credentials


def authorize() -> Credentials | ServiceAccountCredentials:
    """
    Authorize with Google APIs.

    Checks for service account path first, then falls back to OAuth2.

    Returns:
        Valid credentials for Google API access
    """
    service_account_path = os.environ.get("SERVICE_ACCOUNT_PATH")
    if service_account_path:
        log("Service account path detected. Attempting service account authentication...")
        return _authorize_with_service_account(service_account_path)

    log("No service account path detected. Falling back to standard OAuth 2.0 flow...")
    credentials_dir = get_credentials_dir()
    credentials = _load_saved_credentials(credentials_dir / "token.json")
    if credentials:
        log("Using saved credentials.")
        return credentials
    log("Starting authentication flow...")
    return _authenticate(credentials_dir)


# Global client (initialized lazily)
_docs_client = None


def get_docs_client():
    """
    Get the Google Docs API client.

    Returns:
        Google Docs API client resource

    Raises:
        AuthError: If no credentials can be obtained
    """
    global _docs_client

    if _docs_client is not None:
        return _docs_client

    log("Attempting to authorize Google API client...")
    credentials = authorize()
    log("Google API client authorized successfully.")

    _docs_client = build("docs", "v1", credentials=credentials)
    return _docs_client
