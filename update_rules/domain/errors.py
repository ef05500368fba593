"""Error taxonomy for version parsing and policy configuration."""


class UpdateRulesError(Exception):
    """Base class for every error raised by update_rules."""


class VersionParseError(UpdateRulesError, ValueError):
    """A version string could not be turned into a SemanticVersion."""

    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text


class EmptyVersionError(VersionParseError):
    def __init__(self, text: str):
        super().__init__(text, f"Version string {text!r} has no components")


class MalformedComponentError(VersionParseError):
    def __init__(self, text: str, component: str, index: int):
        super().__init__(
            text,
            f"Version string {text!r} has a malformed component {component!r} at position {index}",
        )
        self.component = component
        self.index = index


class InvalidPolicyError(UpdateRulesError, ValueError):
    """A policy was configured with unusable values."""


class UnknownPresetError(InvalidPolicyError):
    def __init__(self, name: str, known: list[str]):
        super().__init__(f"Unknown preset {name!r} (expected one of: {', '.join(known)})")
        self.name = name
