"""
Host adapter wiring the rewrite passes to package-manager events.

The host subscribes the handlers listed by ``Plugin.get_subscribed_events()``
and calls them with its operation and download objects.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from .config import Settings, get_settings
from .env_view import EnvironmentView
from .resolver import PlaceholderResolver
from .rewriter import UrlRewriter, select_operation_package

logger = logging.getLogger(__name__)

PRE_PACKAGE_INSTALL = "pre-package-install"
PRE_PACKAGE_UPDATE = "pre-package-update"
PRE_FILE_DOWNLOAD = "pre-file-download"


class Plugin:
    """Dispatches host events onto a UrlRewriter."""

    def __init__(self, rewriter: Optional[UrlRewriter] = None) -> None:
        self._settings: Optional[Settings] = None
        self._rewriter = rewriter

    @staticmethod
    def get_subscribed_events() -> Dict[str, Tuple[str, int]]:
        """Return ``event name -> (handler name, priority)``."""
        return {
            PRE_PACKAGE_INSTALL: ("inject_version", 0),
            PRE_PACKAGE_UPDATE: ("inject_version", 0),
            # Run after other download listeners have settled the processed URL
            PRE_FILE_DOWNLOAD: ("inject_placeholders", -1),
        }

    def activate(self, settings: Optional[Settings] = None) -> None:
        """Bind settings and build a rewriter whose .env lookup follows them."""
        self._settings = settings or get_settings()
        resolver = PlaceholderResolver(EnvironmentView.from_settings(self._settings))
        self._rewriter = UrlRewriter(resolver)
        logger.debug(f"activate: Using dotenv path {self._settings.dotenv_path()}")

    @property
    def settings(self) -> Optional[Settings]:
        return self._settings

    @property
    def rewriter(self) -> UrlRewriter:
        if self._rewriter is None:
            self._rewriter = UrlRewriter()
        return self._rewriter

    def inject_version(self, operation: Any) -> None:
        """Handle a pre-install or pre-update event."""
        package = select_operation_package(operation)
        if package is None:
            return

        new_url = self.rewriter.inject_package_version(package)
        if new_url is not None:
            package.dist_url = new_url

    def inject_placeholders(self, event: Any) -> None:
        """
        Handle a pre-file-download event.

        The event's fetch config is replaced only when the processed URL
        contained placeholders.

        Raises:
            MissingVariableError: If a placeholder cannot be resolved. The
                event is left untouched.
        """
        result = self.rewriter.inject_placeholders(event.processed_url, event.fetch_config)
        if result.rewritten:
            event.fetch_config = result.fetch_config
