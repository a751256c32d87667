from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class AuthenticatedUser:
    """The admin account behind the current request, passed to handlers explicitly."""

    id: int
    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @classmethod
    def from_user(cls, user) -> "AuthenticatedUser":
        return cls(id=user.id, username=user.username, role=user.role)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "username": self.username, "role": self.role}
