"""Configuration management for the rosactl application."""
import json
import os
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

DEFAULT_OCM_URL = "https://api.openshift.com"
DEFAULT_TOKEN_URL = "https://sso.redhat.com/auth/realms/redhat-external/protocol/openid-connect/token"
DEFAULT_CLIENT_ID = "cloud-services"


class Config:
    """Application configuration with sensible defaults."""

    # OCM API Configuration
    OCM_URL: str = os.getenv("OCM_URL", "")
    OCM_TOKEN: str = os.getenv("OCM_TOKEN", "")
    OCM_ACCESS_TOKEN: str = os.getenv("OCM_ACCESS_TOKEN", "")
    OCM_CLIENT_ID: str = os.getenv("OCM_CLIENT_ID", "")
    OCM_TOKEN_URL: str = os.getenv("OCM_TOKEN_URL", "")
    OCM_CONFIG: str = os.getenv("OCM_CONFIG", "~/.config/ocm/ocm.json")

    # Cluster lookup filters
    ROSA_CREATOR_ARN: str = os.getenv("ROSA_CREATOR_ARN", "")
    ROSA_PRODUCT_ID: str = os.getenv("ROSA_PRODUCT_ID", "rosa")

    # Timeouts (in seconds)
    API_TIMEOUT: int = int(os.getenv("API_TIMEOUT", "30"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Security
    REDACT_KEYS: tuple = ("access_token", "refresh_token", "authorization", "password", "secret", "token")

    @classmethod
    def load_ocm_file(cls, path: Optional[str] = None) -> Dict[str, Any]:
        """Read the JSON configuration file written by `ocm login`.

        Returns an empty dict when the file does not exist.
        """
        config_path = Path(os.path.expanduser(path or cls.OCM_CONFIG))
        if not config_path.exists():
            return {}
        with open(config_path) as f:
            return json.load(f)

    @classmethod
    def connection_settings(cls, path: Optional[str] = None) -> Dict[str, Any]:
        """Merge the OCM config file with the environment; the environment wins."""
        settings = cls.load_ocm_file(path)
        return {
            "url": cls.OCM_URL or settings.get("url") or DEFAULT_OCM_URL,
            "access_token": cls.OCM_ACCESS_TOKEN or settings.get("access_token", ""),
            "refresh_token": cls.OCM_TOKEN or settings.get("refresh_token", ""),
            "client_id": cls.OCM_CLIENT_ID or settings.get("client_id") or DEFAULT_CLIENT_ID,
            "token_url": cls.OCM_TOKEN_URL or settings.get("token_url") or DEFAULT_TOKEN_URL,
            "timeout": cls.API_TIMEOUT,
        }

    @classmethod
    def validate(cls, settings: Dict[str, Any]) -> None:
        """Validate required configuration."""
        if not settings.get("access_token") and not settings.get("refresh_token"):
            raise ValueError(
                "Not logged in: set OCM_TOKEN or run 'ocm login' to create "
                f"{cls.OCM_CONFIG}"
            )

# Don't validate on import to allow for dynamic configuration
# Call Config.validate() explicitly when needed
