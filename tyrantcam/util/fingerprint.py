"""Visitor fingerprinting.

A fingerprint is the SHA-256 hex digest of the client address concatenated
with a fixed salt, so the raw address is never stored.
"""

import hashlib

from fastapi import Request

from tyrantcam.config import VotingSettings

UNKNOWN_CLIENT = "unknown"


def compute_fingerprint(client_ip: str, salt: str) -> str:
    """Hash a client address into a 64-character hex fingerprint.

    Args:
        client_ip: Client address as seen by the API
        salt: Fixed salt appended before hashing

    Returns:
        Lowercase SHA-256 hex digest
    """
    return hashlib.sha256(f"{client_ip}{salt}".encode("utf-8")).hexdigest()


def client_ip_from_request(request: Request, trust_forwarded_for: bool) -> str:
    """Resolve the client address of a request.

    Args:
        request: Incoming request
        trust_forwarded_for: Use the first X-Forwarded-For hop when present

    Returns:
        Client address, or "unknown" when the peer address is unavailable
    """
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            first_hop = forwarded.split(",")[0].strip()
            if first_hop:
                return first_hop

    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


def fingerprint_request(request: Request, settings: VotingSettings) -> str:
    """Compute the fingerprint for the visitor behind a request."""
    client_ip = client_ip_from_request(request, settings.trust_forwarded_for)
    return compute_fingerprint(client_ip, settings.fingerprint_salt)
