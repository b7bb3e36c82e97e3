#!/usr/bin/env python3
"""Render every shape and transition through the CLI and check the output files."""

from __future__ import annotations

import json
import os
import subprocess
import time
from datetime import datetime, timezone
from pathlib import Path

from PIL import Image

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DIST_DIR = PROJECT_ROOT / "dist" / "gallery"
RESULTS_FILE = DIST_DIR / "results.json"
SUITE_NAME = "gallery"

CASES = [
    {"name": "shape-stack", "args": ["render", "stack"], "suffix": ".png"},
    {"name": "shape-arrow", "args": ["render", "arrow"], "suffix": ".png"},
    {"name": "shape-cross", "args": ["render", "cross", "--stroke", "bold"], "suffix": ".png"},
    {"name": "shape-check", "args": ["render", "check", "--stroke", "thin"], "suffix": ".png"},
    {"name": "shape-arrow-rtl", "args": ["render", "arrow", "--rtl"], "suffix": ".png"},
    {"name": "morph-stack-arrow", "args": ["animate", "stack", "arrow"], "suffix": ".gif"},
    {"name": "morph-arrow-cross", "args": ["animate", "arrow", "cross"], "suffix": ".gif"},
    {"name": "morph-cross-check", "args": ["animate", "cross", "check"], "suffix": ".gif"},
    {"name": "morph-check-hidden", "args": ["animate", "check", "hidden"], "suffix": ".gif"},
    {"name": "morph-stack-cross", "args": ["animate", "stack", "cross"], "suffix": ".gif"},
    {"name": "morph-stack-check", "args": ["animate", "stack", "check"], "suffix": ".gif"},
    {"name": "morph-stack-hidden", "args": ["animate", "stack", "hidden"], "suffix": ".gif"},
    {"name": "morph-arrow-check", "args": ["animate", "arrow", "check"], "suffix": ".gif"},
    {"name": "morph-arrow-hidden", "args": ["animate", "arrow", "hidden"], "suffix": ".gif"},
    {"name": "morph-cross-hidden", "args": ["animate", "cross", "hidden"], "suffix": ".gif"},
    {"name": "morph-arrow-stack", "args": ["animate", "arrow", "stack", "--fps", "30"], "suffix": ".gif"},
]


def _isoformat(dt: datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


def _inspect_image(path: Path) -> tuple[tuple[int, int], int]:
    with Image.open(path) as image:
        return image.size, getattr(image, "n_frames", 1)


def run_case(case: dict, verbose: bool = False) -> dict:
    output = DIST_DIR / f"{case['name']}{case['suffix']}"
    output.parent.mkdir(parents=True, exist_ok=True)
    cmd = ["morphicon", *case["args"], "--output", str(output), "--overwrite", "--scale", "4"]
    env = os.environ.copy()
    started_at = datetime.now(timezone.utc)
    start_monotonic = time.perf_counter()
    if verbose:
        print(f"{case['name']} - {_isoformat(started_at)}")
    proc = subprocess.run(
        cmd,
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
    )
    ended_at = datetime.now(timezone.utc)
    duration = time.perf_counter() - start_monotonic

    size = None
    n_frames = None
    analysis_error = None
    if proc.returncode == 0 and output.exists():
        try:
            size, n_frames = _inspect_image(output)
        except OSError as exc:
            analysis_error = str(exc)

    success = proc.returncode == 0 and size is not None
    if verbose:
        status = "PASS" if success else "FAIL"
        print(f"{status} - {_isoformat(ended_at)} ({duration:.2f}s)")
        if not success:
            print(f"  {analysis_error or proc.stderr.strip() or proc.stdout.strip()}")
        print()

    return {
        "name": case["name"],
        "args": case["args"],
        "returncode": proc.returncode,
        "stdout": proc.stdout.strip(),
        "stderr": proc.stderr.strip(),
        "image_path": str(output.relative_to(PROJECT_ROOT)),
        "image_exists": output.exists(),
        "size": list(size) if size else None,
        "n_frames": n_frames,
        "analysis_error": analysis_error,
        "started_at": _isoformat(started_at),
        "ended_at": _isoformat(ended_at),
        "duration_seconds": duration,
    }


def main() -> int:
    DIST_DIR.mkdir(parents=True, exist_ok=True)
    suite_start = datetime.now(timezone.utc)
    print(f"Starting render suite {SUITE_NAME}")
    print(f"time: {_isoformat(suite_start)}")
    print("--")
    results = [run_case(case, verbose=True) for case in CASES]
    suite_end = datetime.now(timezone.utc)
    payload = {
        "suite": SUITE_NAME,
        "suite_started_at": _isoformat(suite_start),
        "suite_ended_at": _isoformat(suite_end),
        "timestamp": _isoformat(suite_end),
        "cases": results,
    }
    RESULTS_FILE.write_text(json.dumps(payload, indent=2))

    failures = [case for case in results if case["returncode"] != 0 or case["size"] is None]
    status_text = "PASS" if not failures else "FAIL"
    print(f"suite end - {_isoformat(suite_end)} ({status_text})")
    print(f"Wrote results to {RESULTS_FILE}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
