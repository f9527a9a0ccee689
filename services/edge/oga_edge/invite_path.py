from __future__ import annotations

from dataclasses import dataclass


DEFAULT_INVITE_ROUTE = "invite"


@dataclass(frozen=True)
class InvitePath:
    matched: bool
    invite_code: str | None = None
    character_id: str | None = None


NOT_AN_INVITE = InvitePath(matched=False)


def parse_invite_path(path: str | None, route: str = DEFAULT_INVITE_ROUTE) -> InvitePath:
    """
    Parse ``/{route}/{code}`` or ``/{route}/{code}/{character_id}``.

    Empty segments are dropped, so ``//invite//CODE/`` still matches. Anything
    else returns ``NOT_AN_INVITE``.
    """
    parts = [p for p in str(path or "").split("/") if p]
    if len(parts) < 2 or parts[0] != route:
        return NOT_AN_INVITE
    return InvitePath(
        matched=True,
        invite_code=parts[1],
        character_id=parts[2] if len(parts) >= 3 else None,
    )
