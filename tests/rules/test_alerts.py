"""Bounded context: Alert presentation

Business rules for what each severity means to the presentation layer.
"""

from datetime import timedelta

import pytest

from update_rules.domain.alerts import build_alert
from update_rules.domain.model import PromptFrequency, Severity


class TestSeverityMeaning:
    """Severity maps to a number of buttons and whether the alert can be dismissed."""

    @pytest.mark.parametrize(
        "severity, buttons",
        [(Severity.NONE, 0), (Severity.FORCE, 1), (Severity.OPTION, 2), (Severity.SKIP, 3)],
    )
    def test_button_count(self, severity, buttons):
        assert severity.button_count == buttons

    def test_only_force_is_not_dismissible(self):
        assert not Severity.FORCE.is_dismissible
        assert Severity.OPTION.is_dismissible
        assert Severity.SKIP.is_dismissible

    def test_option_and_skip_are_equally_strong(self):
        assert Severity.OPTION.strength == Severity.SKIP.strength
        assert Severity.NONE.strength < Severity.OPTION.strength < Severity.FORCE.strength
        assert Severity.OPTION.is_voluntary and Severity.SKIP.is_voluntary
        assert not Severity.FORCE.is_voluntary


class TestPromptFrequency:
    """Frequency tells the host how long to wait before checking again."""

    def test_intervals(self):
        assert PromptFrequency.IMMEDIATELY.interval == timedelta(0)
        assert PromptFrequency.DAILY.interval == timedelta(days=1)
        assert PromptFrequency.WEEKLY.interval == timedelta(days=7)

    def test_lookup_by_name(self):
        assert PromptFrequency.from_name("Weekly") is PromptFrequency.WEEKLY

    def test_unknown_name_is_rejected(self):
        with pytest.raises(ValueError):
            PromptFrequency.from_name("hourly")


class TestAlertContent:
    """The alert offered to the user depends on the severity."""

    def test_no_alert_for_none(self):
        assert build_alert(Severity.NONE, "Siren", "2.0") is None

    def test_forced_alert_has_only_update_button(self):
        alert = build_alert(Severity.FORCE, "Siren", "2.0")

        assert alert.title == "Update Required"
        assert alert.buttons == ["Update"]
        assert alert.dismissible is False
        assert alert.message == "To continue using Siren,\nplease update to version 2.0."

    def test_option_alert_allows_next_time(self):
        alert = build_alert(Severity.OPTION, "Siren", "2.0")

        assert alert.title == "Update Available"
        assert alert.buttons == ["Update", "Next time"]
        assert "A new version of Siren is available." in alert.message

    def test_skip_alert_allows_skipping_the_version(self):
        alert = build_alert(Severity.SKIP, "Siren", "2.0")

        assert alert.buttons == ["Update", "Next time", "Skip This Version"]
        assert len(alert.buttons) == Severity.SKIP.button_count
