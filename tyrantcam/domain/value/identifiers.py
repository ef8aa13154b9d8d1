"""Strongly typed identifiers for TyrantCam entities."""

from typing import NewType
from uuid import UUID

TyrantId = NewType("TyrantId", UUID)
VoteId = NewType("VoteId", UUID)
SubmissionId = NewType("SubmissionId", UUID)
AdminUserId = NewType("AdminUserId", UUID)
