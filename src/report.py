"""Rendering and export of reconciliation results."""
import csv
import json
import logging
import sys

from constants import Constants

PROPS = Constants.PROPS_FILE_NAME


def render_report(result, stream=None, scan=None):
    """Writes the reconciliation result as plain text.

    Args:
        result (ReconcileResult): Lists produced by the reconciler.
        stream (file, optional): Output stream. Defaults to sys.stdout.
        scan (ScanResult, optional): Adds a summary of skipped entries.
    """
    out = stream if stream is not None else sys.stdout

    out.write(f"Copy the following to {PROPS}:\n\n")
    for name, version in result.to_add:
        out.write(f"<{name}>{version}</{name}>\n")

    if result.to_remove:
        out.write(f"\nRemove the following from {PROPS}:\n\n")
        for name in result.to_remove:
            out.write(f"{name}\n")

    if result.collisions:
        out.write("\nProperty names shared by different packages:\n\n")
        for name, ids in result.collisions.items():
            out.write(f"{name}: {', '.join(ids)}\n")

    if scan is not None and (scan.warnings or scan.parse_errors):
        out.write(
            f"\nSkipped {len(scan.warnings)} invalid reference(s) and "
            f"{len(scan.parse_errors)} unreadable project file(s).\n"
        )


def _rows(result):
    rows = [["action", "property", "version", "packages"]]
    for name, version in result.to_add:
        rows.append(["add", name, version, ""])
    for name in result.to_remove:
        rows.append(["remove", name, "", ""])
    for name, ids in result.collisions.items():
        rows.append(["collision", name, "", ";".join(ids)])
    return rows


def export_csv(result, path):
    """Exports the reconciliation result to a CSV file.

    Args:
        result (ReconcileResult): Lists produced by the reconciler.
        path (str): File path to export the CSV.

    Raises:
        OSError: The file couldn't be written.
    """
    with open(path, 'w', newline='', encoding='utf-8') as file:
        export = csv.writer(file)
        export.writerows(_rows(result))
    logging.info("CSV file has been successfully exported at: %s", path)


def export_json(result, path, scan=None):
    """Exports the reconciliation result to a JSON file.

    Args:
        result (ReconcileResult): Lists produced by the reconciler.
        path (str): File path to export the JSON.
        scan (ScanResult, optional): Adds warnings and scanned projects.

    Raises:
        OSError: The file couldn't be written.
    """
    data = {
        "add": [{"property": name, "version": version} for name, version in result.to_add],
        "remove": list(result.to_remove),
        "collisions": dict(result.collisions),
    }
    if scan is not None:
        data["projects"] = scan.project_paths
        data["warnings"] = [{"path": w.path, "element": w.element} for w in scan.warnings]
        data["parseErrors"] = [{"path": e.path, "message": e.message} for e in scan.parse_errors]
    with open(path, 'w', encoding='utf-8') as file:
        json.dump(data, file, ensure_ascii=False, indent=4)
    logging.info("JSON file has been successfully exported at: %s", path)
