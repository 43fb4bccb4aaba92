from __future__ import annotations

from pathlib import Path
import xml.etree.ElementTree as ET

from specledger.results.models import RunSummary

_SKIPPED_STATUSES = {"pending", "todo", "skipped"}


def _first_line(messages: list[str]) -> str:
    for message in messages:
        if message:
            return message.splitlines()[0]
    return ""


def write_junit(out_dir: Path, summary: RunSummary) -> Path:
    junit_path = out_dir / "junit.xml"
    out_dir.mkdir(parents=True, exist_ok=True)

    results = summary.test_results
    skipped = sum(1 for result in results if result.status in _SKIPPED_STATUSES)
    time_seconds = sum(result.duration or 0 for result in results) / 1000.0

    suite = ET.Element(
        "testsuite",
        attrib={
            "name": summary.test_file_path,
            "tests": str(len(results)),
            "failures": str(summary.num_failing_tests),
            "skipped": str(skipped),
            "time": f"{time_seconds:.3f}",
        },
    )

    for result in results:
        testcase = ET.SubElement(
            suite,
            "testcase",
            attrib={
                "classname": " ".join(result.ancestor_titles),
                "name": result.title,
                "time": f"{(result.duration or 0) / 1000.0:.3f}",
            },
        )
        if result.status == "failed":
            failure = ET.SubElement(
                testcase,
                "failure",
                attrib={"message": _first_line(result.failure_messages)},
            )
            failure.text = "\n\n".join(result.failure_messages)
        elif result.status in _SKIPPED_STATUSES:
            ET.SubElement(testcase, "skipped")

    tree = ET.ElementTree(suite)
    junit_path.write_text(
        ET.tostring(tree.getroot(), encoding="unicode"),
        encoding="utf-8",
    )
    return junit_path
