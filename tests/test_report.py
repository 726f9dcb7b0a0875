"""Tests for report rendering and export."""

import csv
import io
import json
import os
import tempfile

from msbuild.models import (
    InvalidReference,
    PackageSet,
    ParseFailure,
    ReconcileResult,
    ScanResult,
)
from report import export_csv, export_json, render_report


def _result():
    return ReconcileResult(
        to_add=[("PackageVersion_B", "2.0"), ("PackageVersion_A", "1.0")],
        to_remove=["PackageVersion_Old"],
    )


def test_render_keeps_reconciler_order():
    out = io.StringIO()

    render_report(_result(), out)

    assert out.getvalue() == (
        "Copy the following to PackageVersions.props:\n"
        "\n"
        "<PackageVersion_B>2.0</PackageVersion_B>\n"
        "<PackageVersion_A>1.0</PackageVersion_A>\n"
        "\n"
        "Remove the following from PackageVersions.props:\n"
        "\n"
        "PackageVersion_Old\n"
    )


def test_render_without_removals_or_collisions():
    out = io.StringIO()

    render_report(ReconcileResult(to_add=[("PackageVersion_A", "1.0")]), out)

    assert "Remove the following" not in out.getvalue()
    assert "shared by different packages" not in out.getvalue()


def test_render_collisions_and_skip_summary():
    result = _result()
    result.collisions = {"PackageVersion_Foo_Bar": ["Foo.Bar", "Foo_Bar"]}
    scan = ScanResult(
        packages=PackageSet(),
        warnings=[InvalidReference("a.csproj", '<PackageReference Include="X" />')],
        parse_errors=[ParseFailure("b.csproj", "no element found")],
    )
    out = io.StringIO()

    render_report(result, out, scan=scan)

    text = out.getvalue()
    assert "PackageVersion_Foo_Bar: Foo.Bar, Foo_Bar\n" in text
    assert "Skipped 1 invalid reference(s) and 1 unreadable project file(s)." in text


def test_render_defaults_to_stdout(capsys):
    render_report(_result())

    assert "<PackageVersion_A>1.0</PackageVersion_A>" in capsys.readouterr().out


def test_export_json():
    scan = ScanResult(
        packages=PackageSet(),
        warnings=[InvalidReference("a.csproj", '<PackageReference Include="X" />')],
    )
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "out.json")

        export_json(_result(), path, scan=scan)

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    assert data["add"] == [
        {"property": "PackageVersion_B", "version": "2.0"},
        {"property": "PackageVersion_A", "version": "1.0"},
    ]
    assert data["remove"] == ["PackageVersion_Old"]
    assert data["collisions"] == {}
    assert data["projects"] == []
    assert data["warnings"] == [{"path": "a.csproj", "element": '<PackageReference Include="X" />'}]
    assert data["parseErrors"] == []


def test_export_csv():
    result = _result()
    result.collisions = {"PackageVersion_Foo_Bar": ["Foo.Bar", "Foo_Bar"]}
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "out.csv")

        export_csv(result, path)

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
    assert rows == [
        ["action", "property", "version", "packages"],
        ["add", "PackageVersion_B", "2.0", ""],
        ["add", "PackageVersion_A", "1.0", ""],
        ["remove", "PackageVersion_Old", "", ""],
        ["collision", "PackageVersion_Foo_Bar", "", "Foo.Bar;Foo_Bar"],
    ]
