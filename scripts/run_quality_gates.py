#!/usr/bin/env python3
"""
SEO Meta Manager quality gates.

Runs lint, format check, type check and tests, then writes
artifacts/quality_gates_run.json. Exit code 0 when every gate passes.

Usage:
    python scripts/run_quality_gates.py [--only lint,tests]
"""

import argparse
import datetime
import json
import subprocess
import sys
import time
from pathlib import Path
from typing import TypedDict

# --- Types ---


class GateResult(TypedDict):
    status: str  # "pass" | "fail"
    exit_code: int
    duration_s: float
    output: str
    command: list[str]


class GatesReport(TypedDict):
    timestamp_utc: str
    overall_status: str  # "pass" | "fail"
    gates: dict[str, GateResult]


# --- Config ---

ARTIFACTS_DIR = Path("artifacts")

GATES: dict[str, list[str]] = {
    "lint": [sys.executable, "-m", "ruff", "check", "src", "tests"],
    "format": [sys.executable, "-m", "ruff", "format", "--check", "src", "tests"],
    "types": [sys.executable, "-m", "mypy", "src/components/seo_meta", "src/adapters"],
    "tests": [sys.executable, "-m", "pytest", "-q", "--maxfail=1"],
}

# --- Execution ---


def run_gate(name: str, cmd: list[str]) -> GateResult:
    print(f"[{name}] {' '.join(cmd[1:])} ...", end="", flush=True)
    started = time.monotonic()
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        print(" ERROR")
        return {
            "status": "fail",
            "exit_code": -1,
            "duration_s": 0.0,
            "output": str(e),
            "command": cmd,
        }

    status = "pass" if result.returncode == 0 else "fail"
    print(f" {status.upper()}")
    return {
        "status": status,
        "exit_code": result.returncode,
        "duration_s": round(time.monotonic() - started, 2),
        "output": (result.stdout + result.stderr).strip(),
        "command": cmd,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Run quality gates")
    parser.add_argument("--only", help="Comma separated gate names", default="")
    args = parser.parse_args()

    selected = [g for g in args.only.split(",") if g] or list(GATES)
    unknown = set(selected) - set(GATES)
    if unknown:
        parser.error(f"unknown gates: {', '.join(sorted(unknown))}")

    results = {name: run_gate(name, GATES[name]) for name in selected}
    failed = [name for name, res in results.items() if res["status"] != "pass"]

    report: GatesReport = {
        "timestamp_utc": datetime.datetime.now(datetime.UTC).isoformat(),
        "overall_status": "fail" if failed else "pass",
        "gates": results,
    }

    ARTIFACTS_DIR.mkdir(exist_ok=True)
    report_path = ARTIFACTS_DIR / "quality_gates_run.json"
    try:
        report_path.write_text(json.dumps(report, indent=2))
    except OSError as e:
        print(f"\nFAILED to write report artifact: {e}")
        sys.exit(2)
    print(f"\nReport written to: {report_path}")

    if not failed:
        print("SUCCESS: All quality gates passed.")
        sys.exit(0)

    for name in failed:
        print(f"\n--- {name} FAILED (exit code {results[name]['exit_code']}) ---")
        print(results[name]["output"])
    sys.exit(1)


if __name__ == "__main__":
    main()
