# topmark:header:start
#
#   project      : BuildReport
#   file         : metadata.py
#   file_relpath : src/buildreport/reporter/metadata.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tool versions shown at the top of the report.

The reporter's own version comes from installed package metadata, which is
always present for an installed distribution. The compiler version comes from
a compiler handle exposing a ``version`` attribute. A compiler that cannot tell
its version yields a falsy value, which is passed through as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import TYPE_CHECKING, Protocol

from buildreport.config.logging import get_logger
from buildreport.constants import BUILDREPORT_DIST_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

    from buildreport.config.logging import BuildreportLogger

logger: BuildreportLogger = get_logger(__name__)


class CompilerHandle(Protocol):
    """The compiler as seen by the reporter: a display name and a version."""

    @property
    def name(self) -> str:
        """Display name of the compiler."""
        ...

    @property
    def version(self) -> str | None:
        """Version of the compiler, or a falsy value when unknown."""
        ...


@dataclass(frozen=True)
class StaticCompiler:
    """Compiler handle with a version known up front (e.g. from a stats file)."""

    name: str
    version: str | None = None


class InstalledCompiler:
    """Compiler handle reading the version of an installed distribution.

    Args:
        dist_name (str): Distribution name to look up.
        read_version (Callable[[str], str]): Metadata lookup, defaults to
            `importlib.metadata.version`.
    """

    def __init__(
        self,
        dist_name: str,
        *,
        read_version: Callable[[str], str] = get_version,
    ) -> None:
        self._dist_name = dist_name
        self._read_version = read_version

    @property
    def name(self) -> str:
        """Distribution name of the compiler."""
        return self._dist_name

    @property
    def version(self) -> str | None:
        """Installed version, or None when the distribution is not installed."""
        try:
            return self._read_version(self._dist_name)
        except PackageNotFoundError:
            logger.debug("Compiler distribution %r is not installed", self._dist_name)
            return None

    def __repr__(self) -> str:
        return f"InstalledCompiler({self._dist_name!r})"


@dataclass(frozen=True, slots=True)
class ToolVersions:
    """Versions printed on the first two lines of the report."""

    reporter_version: str
    compiler_version: str | None


class VersionResolver:
    """Resolve the reporter and compiler versions.

    Args:
        compiler (CompilerHandle): The compiler whose version is reported.
        reporter_name (str): Distribution name of the reporter.
        read_version (Callable[[str], str]): Metadata lookup for the reporter;
            exceptions it raises are not caught.
    """

    def __init__(
        self,
        compiler: CompilerHandle,
        *,
        reporter_name: str = BUILDREPORT_DIST_NAME,
        read_version: Callable[[str], str] = get_version,
    ) -> None:
        self.compiler = compiler
        self.reporter_name = reporter_name
        self._read_version = read_version

    def resolve(self) -> ToolVersions:
        """Return the current reporter and compiler versions."""
        versions = ToolVersions(
            reporter_version=self._read_version(self.reporter_name),
            compiler_version=self.compiler.version,
        )
        logger.trace("Resolved tool versions: %s", versions)
        return versions
