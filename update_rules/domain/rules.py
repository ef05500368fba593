"""Alert presentation rules: static presets and version-gap driven policies."""

import logging
from typing import Union

from update_rules.domain import version_parser
from update_rules.domain.errors import InvalidPolicyError, UnknownPresetError, VersionParseError
from update_rules.domain.model import (
    ConditionalPolicy,
    Decision,
    PromptFrequency,
    SemanticVersion,
    Severity,
    StaticPolicy,
)

Policy = Union[StaticPolicy, ConditionalPolicy]

logger = logging.getLogger("update_rules.rules")

PRESETS: dict[str, StaticPolicy] = {
    "critical": StaticPolicy(PromptFrequency.IMMEDIATELY, Severity.FORCE),
    "annoying": StaticPolicy(PromptFrequency.IMMEDIATELY, Severity.OPTION),
    "persistent": StaticPolicy(PromptFrequency.DAILY, Severity.OPTION),
    "default": StaticPolicy(PromptFrequency.DAILY, Severity.SKIP),
    "hinting": StaticPolicy(PromptFrequency.WEEKLY, Severity.OPTION),
    "relaxed": StaticPolicy(PromptFrequency.WEEKLY, Severity.SKIP),
}

DEFAULT_PRESET = "default"


def preset_policy(name: str) -> StaticPolicy:
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise UnknownPresetError(name, sorted(PRESETS)) from None


def conditional_policy(
    frequency: PromptFrequency,
    voluntary_gap: int,
    involuntary_gap: int,
    major_involuntary_gap: int,
) -> ConditionalPolicy:
    """Build a ConditionalPolicy, rejecting negative or non-integer thresholds."""
    thresholds = {
        "voluntary_gap": voluntary_gap,
        "involuntary_gap": involuntary_gap,
        "major_involuntary_gap": major_involuntary_gap,
    }
    for name, value in thresholds.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidPolicyError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidPolicyError(f"{name} must be non-negative, got {value}")

    if voluntary_gap > involuntary_gap:
        logger.warning(
            "voluntary_gap=%s exceeds involuntary_gap=%s, OPTION alerts can never fire",
            voluntary_gap,
            involuntary_gap,
        )

    return ConditionalPolicy(
        frequency=frequency,
        voluntary_gap=voluntary_gap,
        involuntary_gap=involuntary_gap,
        major_involuntary_gap=major_involuntary_gap,
    )


def _severity_for_gap(
    installed: SemanticVersion,
    available: SemanticVersion,
    policy: ConditionalPolicy,
) -> Severity:
    major_gap = available.major - installed.major

    # Installed build is newer than the published one (beta/pre-release).
    if major_gap < 0:
        return Severity.NONE

    if major_gap == 1:
        if available.minor >= policy.major_involuntary_gap:
            return Severity.FORCE
        return Severity.NONE

    if major_gap > 1:
        return Severity.FORCE

    if installed.minor + policy.involuntary_gap <= available.minor:
        return Severity.FORCE

    if installed.minor + policy.voluntary_gap <= available.minor:
        return Severity.OPTION

    return Severity.NONE


def decide_severity(
    current: Severity,
    installed: str,
    available: str,
    policy: Policy,
) -> Severity:
    """Return the severity that follows from comparing two version strings.

    Static policies always yield their fixed severity. For conditional
    policies an unparseable input leaves `current` untouched.
    """
    if isinstance(policy, StaticPolicy):
        return policy.severity

    try:
        installed_version = version_parser.parse(installed)
        available_version = version_parser.parse(available)
    except VersionParseError as exc:
        logger.warning("Skipping version comparison: %s", exc)
        return current

    severity = _severity_for_gap(installed_version, available_version, policy)
    logger.debug(
        "installed=%s available=%s -> %s",
        installed_version,
        available_version,
        severity.value,
    )
    return severity


class RuleEngine:
    """Holds one policy and the severity it currently resolves to."""

    def __init__(self, policy: Policy):
        self.policy = policy
        if isinstance(policy, StaticPolicy):
            self._severity = policy.severity
        else:
            self._severity = Severity.NONE

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def frequency(self) -> PromptFrequency:
        return self.policy.frequency

    @property
    def decision(self) -> Decision:
        return Decision(severity=self._severity, frequency=self.policy.frequency)

    @property
    def is_conditional(self) -> bool:
        return isinstance(self.policy, ConditionalPolicy)

    def evaluate(self, installed: str, available: str) -> Severity:
        self._severity = decide_severity(self._severity, installed, available, self.policy)
        return self._severity

    @classmethod
    def from_preset(cls, name: str) -> "RuleEngine":
        return cls(preset_policy(name))

    @classmethod
    def conditional(
        cls,
        frequency: PromptFrequency,
        voluntary_gap: int,
        involuntary_gap: int,
        major_involuntary_gap: int,
    ) -> "RuleEngine":
        return cls(conditional_policy(frequency, voluntary_gap, involuntary_gap, major_involuntary_gap))

    @classmethod
    def critical(cls) -> "RuleEngine":
        """Check on every activation and force the update."""
        return cls(PRESETS["critical"])

    @classmethod
    def annoying(cls) -> "RuleEngine":
        """Check on every activation, allow postponing to the next one."""
        return cls(PRESETS["annoying"])

    @classmethod
    def persistent(cls) -> "RuleEngine":
        """Check daily, allow postponing to the next activation."""
        return cls(PRESETS["persistent"])

    @classmethod
    def default(cls) -> "RuleEngine":
        """Check daily, allow postponing or skipping this version entirely."""
        return cls(PRESETS["default"])

    @classmethod
    def hinting(cls) -> "RuleEngine":
        """Check weekly, allow postponing to the next activation."""
        return cls(PRESETS["hinting"])

    @classmethod
    def relaxed(cls) -> "RuleEngine":
        """Check weekly, allow postponing or skipping this version entirely."""
        return cls(PRESETS["relaxed"])

    def __repr__(self) -> str:
        return f"RuleEngine(policy={self.policy!r}, severity={self._severity.value})"
