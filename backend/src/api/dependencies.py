"""FastAPI dependencies for injection."""
from dataclasses import dataclass

from fastapi import Depends, Request

from core.config import Settings, get_settings
from db.session import get_async_session


@dataclass
class ClientInfo:
    """Provenance of a request: network address and raw User-Agent header."""

    ip_address: str
    user_agent: str


def get_client_info(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> ClientInfo:
    """
    Extract the client address and user agent from the request.

    The address is the socket peer unless TRUST_FORWARDED_FOR is enabled, in
    which case the first X-Forwarded-For entry wins when present.
    """
    ip_address = request.client.host if request.client else ""
    if settings.trust_forwarded_for:
        forwarded_for = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            ip_address = first_hop
    return ClientInfo(
        ip_address=ip_address,
        user_agent=request.headers.get("user-agent", ""),
    )


__all__ = [
    "ClientInfo",
    "get_async_session",
    "get_client_info",
    "get_settings",
]
