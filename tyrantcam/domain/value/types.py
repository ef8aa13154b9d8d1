"""Domain value objects for TyrantCam.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from tyrantcam.domain.value.common import RootValueObject, ValueObject

FINGERPRINT_PATTERN = re.compile(r"[0-9a-fA-F]{64}")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MAX_EVIDENCE_FILE_SIZE = 5 * 1024 * 1024
SUPPORTED_EVIDENCE_TYPES = frozenset(
    {"image/jpeg", "image/png", "image/webp", "application/pdf"}
)


class TyrantCategory(str, Enum):
    """Jurisdiction a tyrant belongs to."""

    FEDERAL = "federal"
    STATE = "state"
    LOCAL = "local"
    LAW_ENFORCEMENT = "law_enforcement"


class SubmissionStatus(str, Enum):
    """Moderation status of a submission."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Fingerprint(RootValueObject[str]):
    """Anonymized visitor fingerprint.

    A SHA-256 hex digest (64 characters). Stored lowercase so the same digest
    in different case counts as the same visitor.
    """

    @field_validator("root")
    @classmethod
    def validate_fingerprint(cls, v: str) -> str:
        """Validate digest format."""
        if not FINGERPRINT_PATTERN.fullmatch(v):
            raise ValueError("Fingerprint must be exactly 64 hexadecimal characters")
        return v.lower()

    @property
    def short(self) -> str:
        """Prefix safe to put in logs."""
        return self.root[:8]


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        if not EMAIL_PATTERN.match(v) or len(v) > 255:
            raise ValueError("Please enter a valid email address")
        return v.lower()


class EvidenceFile(ValueObject):
    """Reference to an uploaded evidence file.

    Files live in external object storage; only the descriptor is kept.
    """

    name: str = Field(min_length=1, max_length=255)
    url: str = Field(min_length=1)
    type: Optional[str] = None
    size: Optional[int] = Field(default=None, ge=0, le=MAX_EVIDENCE_FILE_SIZE)

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: Optional[str]) -> Optional[str]:
        """Only images and PDFs are accepted as evidence."""
        if v is not None and v not in SUPPORTED_EVIDENCE_TYPES:
            raise ValueError("File must be JPEG, PNG, WebP, or PDF")
        return v
