"""What open_target ended up doing."""

from enum import Enum


class OpenAction(str, Enum):
    REVEALED = "revealed"
    OPENED = "opened"
    CREATED = "created"
    NONE = "none"  # directory whose reveal providers all failed
    FAILED = "failed"
