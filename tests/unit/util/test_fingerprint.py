"""Unit tests for visitor fingerprinting."""

import hashlib

from starlette.requests import Request

from tyrantcam.config import VotingSettings
from tyrantcam.domain.value import Fingerprint
from tyrantcam.util.fingerprint import (
    client_ip_from_request,
    compute_fingerprint,
    fingerprint_request,
)


def _request(client: tuple[str, int] | None, forwarded: str | None = None) -> Request:
    headers = []
    if forwarded is not None:
        headers.append((b"x-forwarded-for", forwarded.encode()))
    return Request({"type": "http", "headers": headers, "client": client})


class TestComputeFingerprint:
    """Tests for compute_fingerprint."""

    def test_is_sha256_of_address_and_salt(self):
        """The digest covers the address followed by the salt."""
        expected = hashlib.sha256(b"203.0.113.7-salt").hexdigest()

        assert compute_fingerprint("203.0.113.7", "-salt") == expected

    def test_output_is_a_valid_fingerprint(self):
        """Digests always pass fingerprint validation."""
        digest = compute_fingerprint("unknown", "")

        assert len(digest) == 64
        assert Fingerprint(digest).root == digest

    def test_salt_changes_digest(self):
        """Different salts give unrelated fingerprints for one address."""
        assert compute_fingerprint("10.0.0.1", "a") != compute_fingerprint(
            "10.0.0.1", "b"
        )


class TestClientIp:
    """Tests for client_ip_from_request."""

    def test_uses_peer_address_by_default(self):
        """X-Forwarded-For is ignored unless trusted."""
        request = _request(("10.0.0.1", 5000), forwarded="198.51.100.2")

        assert client_ip_from_request(request, trust_forwarded_for=False) == "10.0.0.1"

    def test_uses_first_forwarded_hop_when_trusted(self):
        """The left-most hop is the original client."""
        request = _request(("10.0.0.1", 5000), forwarded="198.51.100.2, 10.0.0.5")

        assert (
            client_ip_from_request(request, trust_forwarded_for=True) == "198.51.100.2"
        )

    def test_falls_back_to_peer_when_header_blank(self):
        """An empty header falls back to the peer address."""
        request = _request(("10.0.0.1", 5000), forwarded=" ")

        assert client_ip_from_request(request, trust_forwarded_for=True) == "10.0.0.1"

    def test_unknown_client(self):
        """Requests without a peer address share the "unknown" identity."""
        request = _request(None)

        assert client_ip_from_request(request, trust_forwarded_for=False) == "unknown"


class TestFingerprintRequest:
    """Tests for fingerprint_request."""

    def test_combines_address_and_configured_salt(self):
        """The configured salt is applied to the resolved address."""
        settings = VotingSettings(fingerprint_salt="-test")
        request = _request(("192.0.2.10", 443))

        assert fingerprint_request(request, settings) == compute_fingerprint(
            "192.0.2.10", "-test"
        )
