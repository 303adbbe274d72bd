from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StatusKind(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Status:
    kind: StatusKind = StatusKind.INFO
    message: str = ""
    operation: Optional[str] = None

    @property
    def visible(self) -> bool:
        return bool(self.message)

    @classmethod
    def info(cls, message: str, operation: Optional[str] = None) -> "Status":
        return cls(StatusKind.INFO, message, operation)

    @classmethod
    def success(cls, message: str, operation: Optional[str] = None) -> "Status":
        return cls(StatusKind.SUCCESS, message, operation)

    @classmethod
    def error(cls, message: str, operation: Optional[str] = None) -> "Status":
        return cls(StatusKind.ERROR, message, operation)

    @classmethod
    def warning(cls, message: str, operation: Optional[str] = None) -> "Status":
        return cls(StatusKind.WARNING, message, operation)
