"""
Placeholder resolution for ``{%NAME}`` tokens.

A token opens with ``{%`` and closes at the next ``}``; the name may not
contain ``{``, ``%`` or ``}``. Every occurrence of a name is replaced with the
same value, looked up through an EnvironmentView.
"""
import logging
import re
from typing import Dict, List, Optional

from .env_view import EnvironmentView, mask_sensitive

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{%([^{%}]+)\}")


class MissingVariableError(Exception):
    """Raised when a placeholder names a variable that is set nowhere."""

    def __init__(self, name: str, subject: str) -> None:
        self.name = name
        self.subject = subject
        super().__init__(
            f"Can't resolve placeholder {placeholder(name)}. "
            f"Environment variable '{name}' is not set."
        )


def placeholder(name: str) -> str:
    """Return the token text for a variable name."""
    return "{%" + name + "}"


def find_placeholders(subject: str) -> List[str]:
    """Return the distinct placeholder names in ``subject``, in order of first appearance."""
    names: List[str] = []
    for match in PLACEHOLDER_PATTERN.finditer(subject):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names


def has_placeholders(subject: str) -> bool:
    return PLACEHOLDER_PATTERN.search(subject) is not None


class PlaceholderResolver:
    """
    Substitutes ``{%NAME}`` tokens with values from an EnvironmentView.

    Args:
        env_view: Lookup source. Defaults to a view built from settings on
            each call, so the cwd and .env contents are read fresh.
    """

    def __init__(self, env_view: Optional[EnvironmentView] = None) -> None:
        self._env_view = env_view

    def _view(self) -> EnvironmentView:
        if self._env_view is not None:
            return self._env_view
        return EnvironmentView.from_settings()

    def resolve(self, subject: str) -> str:
        """
        Replace every placeholder in ``subject`` with its resolved value.

        Returns ``subject`` unchanged when it has no placeholders.

        Raises:
            MissingVariableError: If any placeholder cannot be resolved. No
                substitution is applied in that case.
        """
        names = find_placeholders(subject)
        if not names:
            logger.debug("resolve: No placeholders found")
            return subject

        logger.debug(f"resolve: Found placeholders {names}")
        view = self._view()
        values: Dict[str, str] = {}
        for name in names:
            value = view.get(name)
            if value is None:
                logger.error(f"resolve: Variable '{name}' is not set")
                raise MissingVariableError(name, subject)
            values[name] = value

        for name, value in values.items():
            logger.debug(f"resolve: {placeholder(name)} -> {mask_sensitive(value)}")

        # Single pass so substituted values are never scanned for tokens.
        return PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(1)], subject)


def resolve_placeholders(subject: str, env_view: Optional[EnvironmentView] = None) -> str:
    """Resolve placeholders in ``subject`` using a one-off resolver."""
    return PlaceholderResolver(env_view).resolve(subject)
