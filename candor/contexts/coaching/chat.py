"""Chat message model shared by the feedback conversation and the persona chats."""

import uuid
from dataclasses import dataclass
from typing import Optional

from candor.utils.timestamp import now_exact

USER_ROLE = "user"
MODEL_ROLE = "model"
ROLES = (USER_ROLE, MODEL_ROLE)


def new_message_id(prefix: str) -> str:
    """Unique message id such as "feedback-3f2a9c1b7d4e"."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class ChatMessage:
    """A single message in a conversation."""

    id: str
    role: str
    text: str
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"role must be one of {ROLES}, got: {self.role!r}")

    @classmethod
    def from_user(cls, text: str) -> "ChatMessage":
        return cls(id=new_message_id("user"), role=USER_ROLE, text=text, timestamp=now_exact())

    @classmethod
    def from_model(cls, text: str, prefix: str = "feedback") -> "ChatMessage":
        return cls(id=new_message_id(prefix), role=MODEL_ROLE, text=text, timestamp=now_exact())

    @property
    def is_error(self) -> bool:
        return self.id.startswith("err-")
