"""Default alert texts and the severity to buttons mapping."""

from typing import Optional

from update_rules.domain.model import AlertContent, Severity

ALERT_TITLE = "Update Available"
ALERT_FORCE_TITLE = "Update Required"
ALERT_MESSAGE = "A new version of {app_name} is available.\nPlease update to version {version}."
ALERT_FORCE_MESSAGE = "To continue using {app_name},\nplease update to version {version}."

UPDATE_BUTTON = "Update"
NEXT_TIME_BUTTON = "Next time"
SKIP_BUTTON = "Skip This Version"

BUTTONS = {
    Severity.FORCE: [UPDATE_BUTTON],
    Severity.OPTION: [UPDATE_BUTTON, NEXT_TIME_BUTTON],
    Severity.SKIP: [UPDATE_BUTTON, NEXT_TIME_BUTTON, SKIP_BUTTON],
}


def build_alert(severity: Severity, app_name: str, new_version: str) -> Optional[AlertContent]:
    """Return the alert to show for `severity`, or None when no alert is due."""
    if not severity.shows_alert:
        return None

    if severity is Severity.FORCE:
        title, template = ALERT_FORCE_TITLE, ALERT_FORCE_MESSAGE
    else:
        title, template = ALERT_TITLE, ALERT_MESSAGE

    return AlertContent(
        title=title,
        message=template.format(app_name=app_name, version=new_version),
        buttons=list(BUTTONS[severity]),
        dismissible=severity.is_dismissible,
    )
