"""
Secure message domain model.
"""

from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True, kw_only=True)
class SecureMessage:
    """
    An expiring, recipient-scoped message held by Filelocker.

    Dates are kept exactly as the service formats them (e.g. "07/07/2018");
    a null date becomes an empty string.
    """

    message_id: int
    owner_id: str = ""
    subject: str = ""
    body: str = ""
    created: str = ""
    expiration: str = ""
    viewed: str = ""
    recipients: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Self:
        """Build from a message object of the ``/message/get_messages`` payload."""
        return cls(
            message_id=int(data["id"]),
            owner_id=data.get("ownerId") or "",
            subject=data.get("subject") or "",
            body=data.get("body") or "",
            created=data.get("creationDatetime") or "",
            expiration=data.get("expirationDatetime") or "",
            viewed=data.get("viewedDatetime") or "",
            recipients=tuple(data.get("messageRecipients") or ()),
        )

    @property
    def is_viewed(self) -> bool:
        return bool(self.viewed)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary representation."""
        return {
            "id": self.message_id,
            "owner_id": self.owner_id,
            "subject": self.subject,
            "body": self.body,
            "created": self.created,
            "expiration": self.expiration,
            "viewed": self.viewed,
            "recipients": list(self.recipients),
        }
