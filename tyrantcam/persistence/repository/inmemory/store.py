"""Shared state behind the in-memory repositories."""

import asyncio

from tyrantcam.domain.model import AdminUser, Submission, Tyrant, Vote
from tyrantcam.domain.value import AdminUserId, SubmissionId, TyrantId, VoteId


class InMemoryStore:
    """Tables of the in-memory backend.

    Repositories built on the same store see each other's writes, so the
    vote repository can adjust tyrant counters and tyrant deletion can
    cascade to votes. The lock makes each ledger write a single atomic
    step with respect to other coroutines.
    """

    def __init__(self) -> None:
        self.tyrants: dict[TyrantId, Tyrant] = {}
        self.votes: dict[VoteId, Vote] = {}
        self.submissions: dict[SubmissionId, Submission] = {}
        self.admin_users: dict[AdminUserId, AdminUser] = {}
        self.lock = asyncio.Lock()
