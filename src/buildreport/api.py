# topmark:header:start
#
#   project      : BuildReport
#   file         : api.py
#   file_relpath : src/buildreport/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public BuildReport API (stable surface).

Integrations (build scripts, watch loops) call `render` once per compilation:

```python
from buildreport import api
from buildreport.model import BuildResult, OutputConfig

failed = api.render(
    BuildResult.from_dict(stats),
    OutputConfig("dist"),
    status_message="watching...",
)
```

`render` builds a default `Reporter` on every call, but all reporters created
without an explicit sink share one `RepaintSink` on stdout (see
`default_sink`), so consecutive reports repaint in place rather than scroll.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from buildreport.config.logging import get_logger
from buildreport.config.settings import ReporterSettings
from buildreport.rendering.columns import make_layout
from buildreport.rendering.repaint import RepaintSink
from buildreport.rendering.theme import make_theme
from buildreport.reporter.manifest import make_gzip_sizer
from buildreport.reporter.metadata import InstalledCompiler, StaticCompiler, VersionResolver
from buildreport.reporter.render import Reporter

if TYPE_CHECKING:
    from collections.abc import Callable

    from buildreport.config.logging import BuildreportLogger
    from buildreport.model import BuildResult, OutputConfig
    from buildreport.rendering.repaint import Sink
    from buildreport.rendering.theme import Theme
    from buildreport.reporter.metadata import CompilerHandle

logger: BuildreportLogger = get_logger(__name__)

_default_sink: RepaintSink | None = None


def default_sink() -> RepaintSink:
    """Return the process-wide repaint sink on the current `sys.stdout`.

    The sink is created on first use and replaced when `sys.stdout` has been
    swapped since (e.g. by a test runner capturing output).
    """
    global _default_sink
    if _default_sink is None or _default_sink.stream is not sys.stdout:
        _default_sink = RepaintSink(sys.stdout)
    return _default_sink


def compiler_for(result: BuildResult | None, settings: ReporterSettings) -> CompilerHandle:
    """Return the compiler handle for ``result``.

    A version embedded in the stats document wins over installed metadata.
    """
    if result is not None and result.compiler_version:
        return StaticCompiler(settings.compiler, result.compiler_version)
    return InstalledCompiler(settings.compiler)


def create_reporter(
    settings: ReporterSettings | None = None,
    *,
    compiler: CompilerHandle | None = None,
    sink: Sink | None = None,
    theme: Theme | None = None,
    enable_color: bool = True,
    is_dir: Callable[[str], bool] = os.path.isdir,
    exists: Callable[[str], bool] = os.path.exists,
    read_version: Callable[[str], str] | None = None,
) -> Reporter:
    """Create a reporter wired with the stock collaborators.

    Args:
        settings (ReporterSettings | None): Reporter settings; defaults apply when None.
        compiler (CompilerHandle | None): Compiler handle; defaults to the
            installed distribution named by ``settings.compiler``.
        sink (Sink | None): Report destination; defaults to the shared `default_sink`.
        theme (Theme | None): Presentation; derived from ``enable_color`` when None.
        enable_color (bool): Whether the default theme uses ANSI colors.
        is_dir (Callable[[str], bool]): Check for the output directory.
        exists (Callable[[str], bool]): Check for the asset files.
        read_version (Callable[[str], str] | None): Metadata lookup for the
            reporter version; defaults to `importlib.metadata.version`.

    Returns:
        Reporter: The configured reporter.
    """
    settings = settings or ReporterSettings()
    resolver_kwargs = {} if read_version is None else {"read_version": read_version}
    versions = VersionResolver(
        compiler or InstalledCompiler(settings.compiler),
        reporter_name=settings.reporter_name,
        **resolver_kwargs,
    )
    logger.debug("Creating reporter with %s", settings)
    return Reporter(
        versions=versions,
        sink=sink or default_sink(),
        theme=theme or make_theme(enable_color=enable_color),
        is_dir=is_dir,
        exists=exists,
        layout=make_layout(width=settings.width, padding=settings.column_padding),
        gzip_sizer=make_gzip_sizer(settings.gzip, ratio=settings.gzip_ratio),
    )


def render(
    result: BuildResult,
    config: OutputConfig,
    status_message: str | None = None,
    *,
    settings: ReporterSettings | None = None,
    sink: Sink | None = None,
    theme: Theme | None = None,
    enable_color: bool = True,
) -> bool:
    """Render one report for ``result`` and return True if the build failed.

    Args:
        result (BuildResult): The build result.
        config (OutputConfig): Output location of the build.
        status_message (str | None): Optional text appended after the banner.
        settings (ReporterSettings | None): Reporter settings.
        sink (Sink | None): Report destination; defaults to the shared `default_sink`.
        theme (Theme | None): Presentation; derived from ``enable_color`` when None.
        enable_color (bool): Whether the default theme uses ANSI colors.

    Returns:
        bool: The failure flag.
    """
    settings = settings or ReporterSettings()
    reporter = create_reporter(
        settings,
        compiler=compiler_for(result, settings),
        sink=sink,
        theme=theme,
        enable_color=enable_color,
    )
    return reporter.render(result, config, status_message)
