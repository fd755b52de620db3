"""
URL rewriting passes.

Two independent passes run at different points of the host lifecycle:

- version injection, once per install/update operation, on the package's raw
  distribution URL;
- placeholder injection, once per file download, on the fully processed URL.
"""
import logging
from typing import Any, Optional

from .resolver import PlaceholderResolver, has_placeholders, placeholder
from .types import FetchConfig, RewriteResult

logger = logging.getLogger(__name__)

VERSION_PLACEHOLDER = placeholder("version")
VERSION_SUFFIX_PREFIX = "#v"

JOB_INSTALL = "install"
JOB_UPDATE = "update"


def select_operation_package(operation: Any) -> Optional[Any]:
    """
    Return the package a version injection applies to.

    Install jobs use their sole package and update jobs their target package.
    Any other job type yields None without touching the operation's packages.
    """
    job_type = operation.job_type
    if job_type == JOB_INSTALL:
        return operation.package
    if job_type == JOB_UPDATE:
        return operation.target_package
    logger.debug(f"select_operation_package: Ignoring job type '{job_type}'")
    return None


class UrlRewriter:
    """
    Rewrites distribution and download URLs.

    Args:
        resolver: Placeholder resolver used by the download-time pass.
    """

    def __init__(self, resolver: Optional[PlaceholderResolver] = None) -> None:
        self._resolver = resolver or PlaceholderResolver()

    def inject_version(self, dist_url: str, pretty_version: str) -> str:
        """
        Bake the package version into a distribution URL.

        ``{%version}`` is replaced wherever it occurs; without it the URL gets
        a ``#v<version>`` suffix. Other placeholders are left for download time.
        """
        if VERSION_PLACEHOLDER in dist_url:
            logger.debug(f"inject_version: Replacing {VERSION_PLACEHOLDER} with '{pretty_version}'")
            return dist_url.replace(VERSION_PLACEHOLDER, pretty_version)

        logger.debug(f"inject_version: Appending version suffix for '{pretty_version}'")
        return f"{dist_url}{VERSION_SUFFIX_PREFIX}{pretty_version}"

    def inject_operation_version(self, operation: Any) -> Optional[str]:
        """
        Apply version injection to the package of an install or update operation.

        Packages whose dist URL carries no placeholder are left alone and their
        version is never read.

        Returns:
            The new dist URL, or None when the operation needs no change.
        """
        package = select_operation_package(operation)
        if package is None:
            return None
        return self.inject_package_version(package)

    def inject_package_version(self, package: Any) -> Optional[str]:
        """
        Apply version injection to a package already selected from its operation.

        Returns:
            The new dist URL, or None when the dist URL has no placeholders.
        """
        dist_url = package.dist_url
        if not dist_url or not has_placeholders(dist_url):
            logger.debug("inject_package_version: Dist URL has no placeholders")
            return None

        new_url = self.inject_version(dist_url, package.pretty_version)
        logger.info(f"inject_package_version: Injected version into dist URL of '{package.name}'")
        return new_url

    def inject_placeholders(
        self, processed_url: str, current_fetch_config: FetchConfig
    ) -> RewriteResult:
        """
        Resolve placeholders in a download URL.

        Returns:
            An unchanged result when the URL has no placeholders, otherwise a
            rewritten result whose fetch config targets the resolved URL.

        Raises:
            MissingVariableError: If a placeholder cannot be resolved.
        """
        if not has_placeholders(processed_url):
            logger.debug("inject_placeholders: URL unchanged")
            return RewriteResult(url=processed_url)

        url = self._resolver.resolve(processed_url)
        logger.info("inject_placeholders: Rewrote download URL, using private URL override")
        return RewriteResult(url=url, fetch_config=current_fetch_config.with_private_url(url))
