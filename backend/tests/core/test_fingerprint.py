"""Tests for device fingerprint derivation."""
import hashlib
import re

from core.fingerprint import derive_device_hash

HEX_64 = re.compile(r"[0-9a-f]{64}")


def test__derive_device_hash__is_deterministic() -> None:
    """Same address and agent always give the same digest."""
    first = derive_device_hash("1.2.3.4", "TestAgent")
    second = derive_device_hash("1.2.3.4", "TestAgent")
    assert first == second


def test__derive_device_hash__matches_sha256_of_concatenation() -> None:
    """Digest is sha256 of address followed by agent, no separator."""
    expected = hashlib.sha256(b"1.2.3.4TestAgent").hexdigest()
    assert derive_device_hash("1.2.3.4", "TestAgent") == expected


def test__derive_device_hash__empty_inputs_give_fixed_length_hex() -> None:
    """Empty strings are valid input and still yield a 64-char hex digest."""
    digest = derive_device_hash("", "")
    assert HEX_64.fullmatch(digest)
    assert digest == hashlib.sha256(b"").hexdigest()


def test__derive_device_hash__long_input_gives_fixed_length_hex() -> None:
    """Output length does not depend on input length."""
    digest = derive_device_hash("2001:db8::1", "Mozilla/5.0 " * 500)
    assert HEX_64.fullmatch(digest)


def test__derive_device_hash__different_agents_differ() -> None:
    """Changing the agent changes the digest."""
    assert derive_device_hash("1.2.3.4", "AgentA") != derive_device_hash("1.2.3.4", "AgentB")


def test__derive_device_hash__concatenation_is_unseparated() -> None:
    """Pairs with the same concatenation collide, as documented."""
    assert derive_device_hash("1.2.3.4", "5Agent") == derive_device_hash("1.2.3.45", "Agent")
