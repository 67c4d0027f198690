"""Device fingerprint derivation."""
import hashlib


def derive_device_hash(ip_address: str, user_agent: str) -> str:
    """
    Derive a stable device identifier from a request's address and user agent.

    The address and agent are concatenated without a separator and hashed with
    SHA-256. The result is a 64-character lowercase hex digest. It is a grouping
    key, not a secret and not a uniqueness constraint: many bookmarks can share
    the same hash.
    """
    return hashlib.sha256(f"{ip_address}{user_agent}".encode()).hexdigest()
