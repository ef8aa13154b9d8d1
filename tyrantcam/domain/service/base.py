"""Domain service base."""


class Service:
    """Marker base for domain services.

    Services hold rules spanning several repositories, such as keeping the
    shame counter in step with the vote ledger.
    """
