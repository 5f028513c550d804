from .client import DEFAULT_TIMEOUT_S, GitHubAppClient
from .hosts import DEFAULT_API_URL, api_base_url
from .models import Installation, InstallationAccessToken

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT_S",
    "GitHubAppClient",
    "Installation",
    "InstallationAccessToken",
    "api_base_url",
]
