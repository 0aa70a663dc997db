from dataclasses import dataclass
from typing import Optional

ATTENDING_CHOICES = ("yes", "no", "maybe")


@dataclass(frozen=True)
class RsvpRecord:
    """One stored RSVP reply. Records are never edited, only deleted."""

    id: int
    guest_name: str
    attending: str
    created_at: str
    email: Optional[str] = None
    guest_count: int = 1
    dietary: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self):
        return {
            "id": self.id,
            "guest_name": self.guest_name,
            "email": self.email,
            "attending": self.attending,
            "guest_count": self.guest_count,
            "dietary": self.dietary,
            "message": self.message,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=int(data["id"]),
            guest_name=data["guest_name"],
            attending=data["attending"],
            created_at=data["created_at"],
            email=data.get("email"),
            guest_count=data.get("guest_count") or 1,
            dietary=data.get("dietary"),
            message=data.get("message"),
        )
