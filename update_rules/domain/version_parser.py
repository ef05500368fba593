"""Dotted version string parsing."""

import logging
from typing import Optional

from update_rules.domain.errors import (
    EmptyVersionError,
    MalformedComponentError,
    VersionParseError,
)
from update_rules.domain.model import SemanticVersion

COMPONENT_COUNT = 4

logger = logging.getLogger("update_rules.parser")


def _is_number(component: str) -> bool:
    return component.isascii() and component.isdigit()


def parse(text: str) -> SemanticVersion:
    """Parse a dotted version string into a 4-component SemanticVersion.

    Supports: 2, 2.4, 2.4.1, 2.4.1.7, v2.4.1.
    Missing trailing components are padded with zeros, components past the
    fourth are dropped.
    """
    cleaned = text.strip()
    if cleaned[:1] in ("v", "V"):
        cleaned = cleaned[1:]

    if not any(ch.isdigit() for ch in cleaned):
        raise EmptyVersionError(text)

    components = cleaned.split(".")
    numbers = []
    for index, component in enumerate(components):
        if not _is_number(component):
            raise MalformedComponentError(text, component, index)
        numbers.append(int(component))

    if len(numbers) > COMPONENT_COUNT:
        logger.debug("Ignoring extra components %s in version %r", numbers[COMPONENT_COUNT:], text)
        numbers = numbers[:COMPONENT_COUNT]

    while len(numbers) < COMPONENT_COUNT:
        numbers.append(0)

    return SemanticVersion(*numbers)


def try_parse(text: str) -> Optional[SemanticVersion]:
    """Like parse(), but returns None instead of raising."""
    try:
        return parse(text)
    except VersionParseError:
        return None
