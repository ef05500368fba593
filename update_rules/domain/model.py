"""Pure domain objects, no framework dependency."""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import NamedTuple, Optional


class SemanticVersion(NamedTuple):
    major: int
    minor: int
    patch: int
    revision: int

    def __str__(self) -> str:
        return ".".join(str(part) for part in self)


class Severity(Enum):
    """How strongly the user is pushed to update."""

    NONE = "none"
    SKIP = "skip"
    OPTION = "option"
    FORCE = "force"

    @property
    def strength(self) -> int:
        # OPTION and SKIP share a rank: they differ in dismissal, not severity.
        return _STRENGTH[self]

    @property
    def shows_alert(self) -> bool:
        return self is not Severity.NONE

    @property
    def is_voluntary(self) -> bool:
        return self in (Severity.OPTION, Severity.SKIP)

    @property
    def is_dismissible(self) -> bool:
        return self is not Severity.FORCE

    @property
    def button_count(self) -> int:
        return _BUTTON_COUNT[self]


_STRENGTH = {
    Severity.NONE: 0,
    Severity.OPTION: 1,
    Severity.SKIP: 1,
    Severity.FORCE: 2,
}

_BUTTON_COUNT = {
    Severity.NONE: 0,
    Severity.FORCE: 1,
    Severity.OPTION: 2,
    Severity.SKIP: 3,
}


class PromptFrequency(Enum):
    """How often the check is re-run. The value is the number of days in between."""

    IMMEDIATELY = 0
    DAILY = 1
    WEEKLY = 7

    @property
    def interval(self) -> timedelta:
        return timedelta(days=self.value)

    @classmethod
    def from_name(cls, name: str) -> "PromptFrequency":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown prompt frequency {name!r}") from None


@dataclass(frozen=True)
class StaticPolicy:
    frequency: PromptFrequency
    severity: Severity


@dataclass(frozen=True)
class ConditionalPolicy:
    frequency: PromptFrequency
    voluntary_gap: int
    involuntary_gap: int
    major_involuntary_gap: int


@dataclass(frozen=True)
class Decision:
    severity: Severity
    frequency: PromptFrequency


@dataclass
class AlertContent:
    title: str
    message: str
    buttons: list[str] = field(default_factory=list)
    dismissible: bool = True


@dataclass
class UpdatePrompt:
    current: str
    latest: str
    decision: Decision
    alert: Optional[AlertContent] = None
