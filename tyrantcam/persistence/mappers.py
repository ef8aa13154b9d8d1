"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from tyrantcam.domain.model import AdminUser, Submission, Tyrant, Vote
from tyrantcam.domain.value import (
    AdminUserId,
    Email,
    EvidenceFile,
    Fingerprint,
    SubmissionId,
    SubmissionStatus,
    TyrantCategory,
    TyrantId,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tyrant(row: Dict[str, Any]) -> Tyrant:
    """Convert database row to Tyrant domain model.

    Args:
        row: Database row as dict

    Returns:
        Tyrant domain model
    """
    return Tyrant(
        id=TyrantId(_uuid(row["id"])),
        name=row["name"],
        title=row["title"],
        position=row["position"],
        category=TyrantCategory(row["category"]),
        description=row["description"],
        image_url=row.get("image_url"),
        evidence_urls=list(row.get("evidence_urls") or []),
        shame_count=row["shame_count"],
        is_published=row["is_published"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tyrant_to_dict(tyrant: Tyrant) -> Dict[str, Any]:
    """Convert Tyrant domain model to database dict."""
    return tyrant.model_dump(mode="python")


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        tyrant_id=TyrantId(_uuid(row["tyrant_id"])),
        fingerprint=Fingerprint(row["fingerprint"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_submission(row: Dict[str, Any]) -> Submission:
    """Convert database row to Submission domain model.

    evidence_files is stored as a JSONB list of file descriptors.
    """
    return Submission(
        id=SubmissionId(_uuid(row["id"])),
        tyrant_name=row["tyrant_name"],
        tyrant_title=row["tyrant_title"],
        category=TyrantCategory(row["category"]),
        description=row["description"],
        evidence_files=[
            EvidenceFile(**item) for item in (row.get("evidence_files") or [])
        ],
        reporter_contact=row.get("reporter_contact"),
        status=SubmissionStatus(row["status"]),
        admin_notes=row.get("admin_notes"),
        submitted_at=row["submitted_at"],
        reviewed_at=row.get("reviewed_at"),
        reviewed_by=AdminUserId(_uuid(row["reviewed_by"]))
        if row.get("reviewed_by")
        else None,
        tyrant_id=TyrantId(_uuid(row["tyrant_id"])) if row.get("tyrant_id") else None,
    )


def submission_to_dict(submission: Submission) -> Dict[str, Any]:
    """Convert Submission domain model to database dict."""
    data = submission.model_dump()
    data["evidence_files"] = [
        f.model_dump(mode="json", exclude_none=True) for f in submission.evidence_files
    ]
    return data


def row_to_admin_user(row: Dict[str, Any]) -> AdminUser:
    """Convert database row to AdminUser domain model."""
    return AdminUser(
        id=AdminUserId(_uuid(row["id"])),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def admin_user_to_dict(admin: AdminUser) -> Dict[str, Any]:
    """Convert AdminUser domain model to database dict."""
    return admin.model_dump()
