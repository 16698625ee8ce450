"""
Panes — Detail & Admin Resolvers

Records are synthesized from their key, never looked up:
1. resolve_details(service) → DetailRecord with 7 SubRecords
2. resolve_admins(owner)    → admin contacts, count from the owner's last digit

Both are pure: the same key always yields an equal record.
"""
from panes.models import DetailRecord, SubRecord

SUB_RECORDS_PER_DETAIL = 7


def resolve_admins(owner: str) -> tuple[str, ...]:
    """Admin contacts for an owning identity.

    The count is the owner's final character read as a digit; a
    non-digit counts as 0 and 0 is raised to 1.
    """
    if not owner:
        return ()
    last = owner[-1]
    count = int(last) if last in "0123456789" else 0
    if count == 0:
        count = 1
    return tuple(f"admin-{i}@example.com" for i in range(1, count + 1))


def resolve_details(service: str) -> DetailRecord:
    """Derive the full record of a service; "" yields the zero record."""
    if not service:
        return DetailRecord()

    users = tuple(
        SubRecord(
            name=f"host:h{i}-of-{service}",
            address=f"10.1.2.{i}",
            owner=f"Owner-{i}",
        )
        for i in range(1, SUB_RECORDS_PER_DETAIL + 1)
    )
    # The detail belongs to its first sub-owner, whatever the service.
    u_owner = users[0].owner
    return DetailRecord(
        name=service,
        description=f"Description of {service}",
        owner=f"Owner-{service}",
        users=users,
        u_owner=u_owner,
        admins=resolve_admins(u_owner),
    )
