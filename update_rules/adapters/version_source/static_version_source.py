"""Version source that returns a version known up front (CLI, tests, offline hosts)."""

from typing import Optional

from update_rules.domain.ports import VersionSourcePort


class StaticVersionSource(VersionSourcePort):

    def __init__(self, version: Optional[str]):
        self.version = version

    def latest_version(self) -> Optional[str]:
        return self.version or None
