"""Use case: decide whether the user should be prompted to update."""

import logging
from typing import Optional

from update_rules.domain.alerts import build_alert
from update_rules.domain.ports import VersionSourcePort
from update_rules.domain.model import UpdatePrompt
from update_rules.domain.rules import RuleEngine
from update_rules.domain.version_parser import parse, try_parse

logger = logging.getLogger("update_rules.check_update")


class CheckUpdateUseCase:

    def __init__(
        self,
        source: VersionSourcePort,
        engine: RuleEngine,
        installed_version: str,
        app_name: str = "this app",
    ):
        self.source = source
        self.engine = engine
        self.installed_version = installed_version
        self.installed = parse(installed_version)
        self.app_name = app_name

    def execute(self) -> Optional[UpdatePrompt]:
        """Return the prompt to present, or None if up-to-date, not due, or on error."""
        try:
            latest = self.source.latest_version()
        except Exception:
            logger.exception("Version source failed")
            return None

        if not latest:
            return None

        latest_tuple = try_parse(latest)
        if latest_tuple is None:
            logger.warning("Unparseable published version %r", latest)
            return None

        # Severity follows the current install even when no prompt is due.
        self.engine.evaluate(self.installed_version, latest)
        decision = self.engine.decision

        if latest_tuple <= self.installed:
            logger.info("Up to date (installed=%s, latest=%s)", self.installed, latest_tuple)
            return None

        logger.info(
            "Update check (installed=%s, latest=%s, severity=%s, frequency=%s)",
            self.installed_version,
            latest,
            decision.severity.value,
            decision.frequency.name.lower(),
        )

        if not decision.severity.shows_alert:
            return None

        shown_latest = latest.strip().lstrip("vV")
        return UpdatePrompt(
            current=self.installed_version,
            latest=shown_latest,
            decision=decision,
            alert=build_alert(decision.severity, self.app_name, shown_latest),
        )
