from __future__ import annotations

DEFAULT_HOST = "github.com"
DEFAULT_API_URL = "https://api.github.com/"


def api_base_url(host: str | None) -> str:
    """Map a GitHub host name onto its REST API root.

    github.com uses api.github.com, GHE.com tenants use ``api.<tenant>.ghe.com``
    and GitHub Enterprise Server serves the API under ``/api/v3/``, below any
    path prefix given with the host.
    """
    if host is None or not host.strip():
        return DEFAULT_API_URL
    value = host.strip().rstrip("/")
    scheme = "https"
    if "://" in value:
        scheme, value = value.split("://", 1)
    hostname, _, prefix = value.partition("/")
    hostname = hostname.lower()
    prefix = prefix.strip("/")

    if hostname in {DEFAULT_HOST, "api.github.com"}:
        return DEFAULT_API_URL
    if hostname.endswith(".ghe.com"):
        if not hostname.startswith("api."):
            hostname = f"api.{hostname}"
        return f"{scheme}://{hostname}/"
    if prefix == "api/v3" or prefix.endswith("/api/v3"):
        prefix = prefix[: -len("api/v3")].rstrip("/")
    root = f"{scheme}://{hostname}/{prefix}/" if prefix else f"{scheme}://{hostname}/"
    return f"{root}api/v3/"
