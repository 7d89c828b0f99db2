"""Response envelope shared by all tool handlers."""

from dataclasses import dataclass
from typing import Optional

MISSING_PARAMETERS = "MISSING_PARAMETERS"
INVALID_PARAMETERS = "INVALID_PARAMETERS"


@dataclass(frozen=True)
class ToolResult:
    """Text returned to the agent, plus an error flag and code for expected failures."""
    text: str
    is_error: bool = False
    error_code: Optional[str] = None

    @classmethod
    def error(cls, text: str, code: str) -> "ToolResult":
        return cls(text=text, is_error=True, error_code=code)
