# This file checks the studio API contract against the committed snapshot.
# It writes an updated snapshot plus a readable diff report and exits non-zero on breaking changes.
# ruff: noqa: E402

from __future__ import annotations

import argparse
import json
import sys
from datetime import UTC, datetime
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from studio_api.api.api_config import get_api_config
from studio_api.api.app import app
from studio_api.api.contracts import detect_breaking_schema_changes, openapi_snapshot

DEFAULT_SNAPSHOT_PATH = Path("reports/api/contract_checks/latest_contract_snapshot.json")
DEFAULT_REPORT_PATH = Path("reports/api/contract_checks/contract_diff_report.md")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare the OpenAPI contract with the last snapshot")
    parser.add_argument("--snapshot", type=Path, default=DEFAULT_SNAPSHOT_PATH)
    parser.add_argument("--report", type=Path, default=DEFAULT_REPORT_PATH)
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    config = get_api_config()
    args.snapshot.parent.mkdir(parents=True, exist_ok=True)
    args.report.parent.mkdir(parents=True, exist_ok=True)

    current = openapi_snapshot(app, api_base_path=config.api_base_path, app_version=config.app_version)

    previous: dict[str, object] | None = None
    if args.snapshot.exists():
        previous = json.loads(args.snapshot.read_text(encoding="utf-8"))

    findings: list[str] = []
    if previous is not None:
        findings = detect_breaking_schema_changes(previous_snapshot=previous, current_snapshot=current)

    args.report.write_text(_build_report(previous=previous, current=current, findings=findings), encoding="utf-8")
    args.snapshot.write_text(json.dumps(current, indent=2, sort_keys=True), encoding="utf-8")

    if previous is None:
        print("No previous API snapshot found. A new baseline snapshot was created.")
        return 0

    if findings:
        print("Breaking contract changes detected:")
        for item in findings:
            print(f"- {item}")
        return 1

    print("No breaking API contract changes detected.")
    return 0


def _build_report(
    *,
    previous: dict[str, object] | None,
    current: dict[str, object],
    findings: list[str],
) -> str:
    lines: list[str] = [
        "# API Contract Diff Report",
        "",
        f"Generated at: {datetime.now(tz=UTC).isoformat()}",
        "",
        f"Base path: `{current.get('api_base_path')}`",
        f"App version: `{current.get('app_version')}`",
        "",
    ]

    if previous is None:
        lines.extend(["## Status", "", "No previous snapshot existed. This run created the initial baseline."])
        return "\n".join(lines) + "\n"

    lines.append("## Breaking Change Findings")
    lines.append("")
    if not findings:
        lines.append("No breaking differences were detected.")
    else:
        lines.extend([f"- {item}" for item in findings])

    return "\n".join(lines) + "\n"


if __name__ == "__main__":
    raise SystemExit(main())
