"""
results.py - API result variants
Single responsibility: tag every API response as Ok(data) or Err(reason).
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Ok:
    data: Any

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    reason: str
    status_code: Optional[int] = None

    @property
    def is_ok(self) -> bool:
        return False

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.reason} (HTTP {self.status_code})"
        return self.reason


Result = Ok | Err
