# topmark:header:start
#
#   project      : BuildReport
#   file         : test_render.py
#   file_relpath : tests/reporter/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporter tests: whole-report snapshots and section gating.

The reporter is wired to the fakes from `tests.helpers`, so every themed
fragment shows up as ``<role>...</role>`` and column blocks as ``[a | b]``.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from buildreport.model import Asset, OutputConfig
from buildreport.reporter.metadata import StaticCompiler, VersionResolver
from buildreport.reporter.render import Report, Reporter, output_uri
from tests.helpers import TAG_THEME, RecordingSink, bracket_layout, make_result

HEADER_OK = (
    "\n"
    "(i) buildreport: 9.9.9\n"
    "(i) typescript: 1.1.1\n"
    "(v) hash: hash\n"
    "(x) errors: 0\n"
    "(!) warnings: 0\n"
)
ASSET_ONE = "assetOne.js <raw>(0.98kb)</raw> / <gz>(0.29kb gz)</gz>"
MANIFEST = (
    "<label>chunks:</label>\n"
    "[chunkOne]\n"
    "<label>assets:</label>\n"
    f"[{ASSET_ONE} | {ASSET_ONE}]"
)
SUCCESS = "<ok>The build completed successfully.</ok>"
FAILURE = "<alert>The build completed with errors.</alert>"


def _footer(dist_dir: Path) -> str:
    return f"<label>output at: <link>{output_uri(str(dist_dir))}</link></label>\n\n"


def test_render_successful_build(
    reporter: Reporter, sink: RecordingSink, output_config: OutputConfig, dist_dir: Path
) -> None:
    """A clean build prints the header, the manifest and the success banner."""
    failed = reporter.render(make_result(), output_config)

    assert failed is False
    assert sink.writes == [
        HEADER_OK + "\n" + MANIFEST + "\n" + _footer(dist_dir) + SUCCESS + "\n"
    ]


def test_render_appends_status_message(
    reporter: Reporter, sink: RecordingSink, output_config: OutputConfig, dist_dir: Path
) -> None:
    reporter.render(make_result(), output_config, "watching for changes...")

    assert sink.writes == [
        HEADER_OK
        + "\n"
        + MANIFEST
        + "\n"
        + _footer(dist_dir)
        + SUCCESS
        + "\n\nwatching for changes...\n"
    ]


@pytest.mark.parametrize("status_message", [None, ""])
def test_render_skips_empty_status_message(
    reporter: Reporter,
    sink: RecordingSink,
    output_config: OutputConfig,
    status_message: str | None,
) -> None:
    reporter.render(make_result(), output_config, status_message)

    assert sink.writes[0].endswith(SUCCESS + "\n")


def test_render_without_output_directory_omits_manifest(
    reporter: Reporter, sink: RecordingSink, tmp_path: Path
) -> None:
    """When the output directory does not exist, the whole manifest section is left out."""
    missing = tmp_path / "not-built-yet"

    reporter.render(make_result(), OutputConfig(str(missing)))

    text = sink.writes[0]
    assert "chunks:" not in text
    assert "assets:" not in text
    assert text == HEADER_OK + "\n\n" + _footer(missing) + SUCCESS + "\n"


def test_render_errors_and_warnings(
    reporter: Reporter, sink: RecordingSink, output_config: OutputConfig, dist_dir: Path
) -> None:
    result = make_result(errors=("err1", "err2"), warnings=("warn1",))

    failed = reporter.render(result, output_config)

    assert failed is True
    expected = (
        "\n"
        "(i) buildreport: 9.9.9\n"
        "(i) typescript: 1.1.1\n"
        "(v) hash: hash\n"
        "(x) errors: 2\n"
        "(!) warnings: 1\n"
        "\n<label>errors:</label><alert>\nerr1\nerr2</alert>\n"
        "\n<label>warnings:</label><caution>\nwarn1</caution>\n"
        "\n" + MANIFEST + "\n" + _footer(dist_dir) + FAILURE + "\n"
    )
    assert sink.writes == [expected]


def test_warnings_alone_do_not_fail_the_build(
    reporter: Reporter, sink: RecordingSink, output_config: OutputConfig
) -> None:
    failed = reporter.render(make_result(warnings=("deprecated option",)), output_config)

    assert failed is False
    assert "<label>warnings:</label><caution>\ndeprecated option</caution>\n" in sink.writes[0]
    assert "errors:</label>" not in sink.writes[0]
    assert sink.writes[0].endswith(SUCCESS + "\n")


def test_render_skips_assets_missing_on_disk(
    reporter: Reporter, sink: RecordingSink, output_config: OutputConfig
) -> None:
    result = make_result(assets=(Asset("assetOne.js", 1000), Asset("assetTwo.js", 2000)))

    reporter.render(result, output_config)

    assert f"<label>assets:</label>\n[{ASSET_ONE}]\n" in sink.writes[0]
    assert "assetTwo.js" not in sink.writes[0]


def test_render_keeps_each_render_independent(
    reporter: Reporter, sink: RecordingSink, output_config: OutputConfig
) -> None:
    """A reporter keeps no state between two renders."""
    first = reporter.render(make_result(errors=("boom",)), output_config)
    second = reporter.render(make_result(hash="other"), output_config)

    assert (first, second) == (True, False)
    assert len(sink.writes) == 2
    assert "(x) errors: 1\n" in sink.writes[0]
    assert "(v) hash: other\n(x) errors: 0\n" in sink.writes[1]
    assert "boom" not in sink.writes[1]


def test_compose_does_not_write(
    reporter: Reporter, sink: RecordingSink, output_config: OutputConfig
) -> None:
    report = reporter.compose(make_result(errors=("x",)), output_config)

    assert isinstance(report, Report)
    assert report.failed is True
    assert report.text.startswith("\n(i) buildreport: 9.9.9\n")
    assert sink.writes == []


def test_render_shows_falsy_compiler_version(
    sink: RecordingSink, output_config: OutputConfig
) -> None:
    versions = VersionResolver(StaticCompiler("webpack"), read_version=lambda _name: "1.0.0")
    reporter = Reporter(versions=versions, sink=sink, theme=TAG_THEME, layout=bracket_layout)

    reporter.render(make_result(), output_config)

    assert "(i) webpack: None\n" in sink.writes[0]


def test_render_uses_injected_filesystem_checks(
    fake_versions: VersionResolver, sink: RecordingSink
) -> None:
    """Injected checks decide both gates; the real filesystem is never consulted."""
    dirs_checked: list[str] = []
    files_checked: list[str] = []

    def is_dir(path: str) -> bool:
        dirs_checked.append(path)
        return True

    def exists(path: str) -> bool:
        files_checked.append(path)
        return True

    reporter = Reporter(
        versions=fake_versions,
        sink=sink,
        theme=TAG_THEME,
        is_dir=is_dir,
        exists=exists,
        layout=bracket_layout,
    )
    reporter.render(make_result(), OutputConfig("/nowhere/dist"))

    assert dirs_checked == ["/nowhere/dist"]
    assert files_checked == [
        os.path.join("/nowhere/dist", "assetOne.js"),
        os.path.join("/nowhere/dist", "assetOne.js"),
    ]
    assert f"[{ASSET_ONE} | {ASSET_ONE}]" in sink.writes[0]


def test_render_skips_manifest_when_output_path_is_a_file(
    fake_versions: VersionResolver, sink: RecordingSink, tmp_path: Path
) -> None:
    output_file = tmp_path / "dist"
    output_file.write_text("not a directory")
    reporter = Reporter(versions=fake_versions, sink=sink, theme=TAG_THEME, layout=bracket_layout)

    reporter.render(make_result(), OutputConfig(str(output_file)))

    assert "chunks:" not in sink.writes[0]
    assert "assets:" not in sink.writes[0]
    assert f"output at: <link>{output_file.as_uri()}</link>" in sink.writes[0]


def test_render_propagates_filesystem_errors(
    fake_versions: VersionResolver, sink: RecordingSink, output_config: OutputConfig
) -> None:
    def exists(path: str) -> bool:
        raise PermissionError(path)

    reporter = Reporter(versions=fake_versions, sink=sink, theme=TAG_THEME, exists=exists)

    with pytest.raises(PermissionError):
        reporter.render(make_result(), output_config)
    assert sink.writes == []


def test_render_propagates_sink_errors(
    fake_versions: VersionResolver, output_config: OutputConfig
) -> None:
    class BrokenSink:
        def write(self, text: str) -> None:
            raise BrokenPipeError("stdout closed")

    reporter = Reporter(versions=fake_versions, sink=BrokenSink(), theme=TAG_THEME)

    with pytest.raises(BrokenPipeError):
        reporter.render(make_result(), output_config)


def test_render_propagates_version_lookup_errors(
    sink: RecordingSink, output_config: OutputConfig
) -> None:
    def read_version(name: str) -> str:
        raise LookupError(name)

    versions = VersionResolver(StaticCompiler("webpack", "5"), read_version=read_version)
    reporter = Reporter(versions=versions, sink=sink, theme=TAG_THEME)

    with pytest.raises(LookupError):
        reporter.render(make_result(), output_config)


def test_output_uri_is_absolute_file_uri(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    uri = output_uri("dist")

    assert uri.startswith("file://")
    assert uri == (Path.cwd() / "dist").as_uri()


def test_output_uri_percent_encodes_path(tmp_path: Path) -> None:
    uri = output_uri(str(tmp_path / "my dist"))

    assert uri.endswith("/my%20dist")
    assert " " not in uri
