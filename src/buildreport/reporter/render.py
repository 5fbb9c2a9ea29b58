# topmark:header:start
#
#   project      : BuildReport
#   file         : render.py
#   file_relpath : src/buildreport/reporter/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compose the build status report and push it to a repaint sink.

The report is assembled from fixed sections, in this order:

1. the header (tool versions, hash, error and warning counts),
2. the error details, if the build has errors,
3. the warning details, if the build has warnings,
4. the chunk and asset manifest, if the output path is a directory,
5. the output location,
6. the closing banner and the optional status message.

The layout is byte-exact; snapshot tests compare whole reports. The reporter
keeps no state between two calls and does not catch exceptions raised by its
collaborators.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from buildreport.config.logging import get_logger
from buildreport.constants import BANNER_FAILURE, BANNER_SUCCESS
from buildreport.rendering.columns import columns
from buildreport.reporter.counting import count
from buildreport.reporter.manifest import RatioGzipSizer, build_manifest

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from decimal import Decimal

    from buildreport.config.logging import BuildreportLogger
    from buildreport.model import Asset, BuildResult, OutputConfig
    from buildreport.rendering.repaint import Sink
    from buildreport.rendering.theme import Theme
    from buildreport.reporter.counting import BuildCounts
    from buildreport.reporter.manifest import Manifest
    from buildreport.reporter.metadata import ToolVersions, VersionResolver

logger: BuildreportLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Report:
    """A rendered report and the build outcome it describes."""

    text: str
    failed: bool


def output_uri(output_path: str) -> str:
    """Return the ``file://`` URI of the (absolutized) output directory."""
    return Path(output_path).absolute().as_uri()


class Reporter:
    """Render build results as a status block on a repaint sink.

    Every collaborator is injected, so the reporter can be driven entirely by
    fakes in tests.

    Args:
        versions (VersionResolver): Resolves the reporter and compiler versions.
        sink (Sink): Receives each finished report as a single write.
        theme (Theme): Symbols and colors.
        is_dir (Callable[[str], bool]): Check for the output directory.
        exists (Callable[[str], bool]): Check for the asset files.
        layout (Callable[[Sequence[str]], str]): Columnar layout helper.
        gzip_sizer (Callable[[Asset, str], Decimal] | None): Source of the gzip
            figure of an asset line.
    """

    def __init__(
        self,
        *,
        versions: VersionResolver,
        sink: Sink,
        theme: Theme,
        is_dir: Callable[[str], bool] = os.path.isdir,
        exists: Callable[[str], bool] = os.path.exists,
        layout: Callable[[Sequence[str]], str] = columns,
        gzip_sizer: Callable[[Asset, str], Decimal] | None = None,
    ) -> None:
        self.versions = versions
        self.sink = sink
        self.theme = theme
        self.is_dir = is_dir
        self.exists = exists
        self.layout = layout
        self.gzip_sizer = gzip_sizer or RatioGzipSizer()

    def compose(
        self,
        result: BuildResult,
        config: OutputConfig,
        status_message: str | None = None,
    ) -> Report:
        """Render ``result`` without writing it anywhere.

        Args:
            result (BuildResult): The build result to report on.
            config (OutputConfig): Output location of the build.
            status_message (str | None): Text appended after the banner, e.g.
                the "watching..." line of a long-running mode.

        Returns:
            Report: The report text and the failure flag.
        """
        versions = self.versions.resolve()
        counts = count(result)
        manifest = build_manifest(
            result,
            config,
            theme=self.theme,
            is_dir=self.is_dir,
            exists=self.exists,
            layout=self.layout,
            gzip_sizer=self.gzip_sizer,
        )

        text = (
            "\n"
            + self._header(result, versions, counts)
            + self._details("errors:", result.errors, self.theme.alert)
            + self._details("warnings:", result.warnings, self.theme.caution)
            + "\n"
            + self._manifest(manifest)
            + "\n"
            + self.theme.label(f"output at: {self.theme.link(output_uri(config.output_path))}")
            + "\n\n"
            + self._banner(counts.failed, status_message)
            + "\n"
        )
        return Report(text=text, failed=counts.failed)

    def render(
        self,
        result: BuildResult,
        config: OutputConfig,
        status_message: str | None = None,
    ) -> bool:
        """Render ``result``, push the report to the sink and return the failure flag.

        Args:
            result (BuildResult): The build result to report on.
            config (OutputConfig): Output location of the build.
            status_message (str | None): Text appended after the banner.

        Returns:
            bool: True if the build reported errors.
        """
        report = self.compose(result, config, status_message)
        self.sink.write(report.text)
        logger.debug("Rendered report for build %s (failed=%s)", result.hash, report.failed)
        return report.failed

    def _header(self, result: BuildResult, versions: ToolVersions, counts: BuildCounts) -> str:
        t = self.theme
        return (
            f"{t.info} {self.versions.reporter_name}: {versions.reporter_version}\n"
            f"{t.info} {self.versions.compiler.name}: {versions.compiler_version}\n"
            f"{t.success} hash: {result.hash}\n"
            f"{t.error} errors: {counts.error_count}\n"
            f"{t.warning} warnings: {counts.warning_count}\n"
        )

    def _details(self, label: str, messages: Sequence[str], color: Callable[[str], str]) -> str:
        if not messages:
            return ""
        body = "".join(f"\n{message}" for message in messages)
        return f"\n{self.theme.label(label)}{color(body)}\n"

    def _manifest(self, manifest: Manifest | None) -> str:
        if manifest is None:
            return ""
        return (
            f"{self.theme.label('chunks:')}\n"
            f"{manifest.chunks_block}\n"
            f"{self.theme.label('assets:')}\n"
            f"{manifest.assets_block}"
        )

    def _banner(self, failed: bool, status_message: str | None) -> str:
        banner = self.theme.alert(BANNER_FAILURE) if failed else self.theme.ok(BANNER_SUCCESS)
        if status_message:
            banner += f"\n\n{status_message}"
        return banner
