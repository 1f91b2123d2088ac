#!/usr/bin/env python3
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd, cwd=ROOT, check=False).returncode


def main() -> int:
    code = run([sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", "test_*.py"])
    if code != 0:
        print("\n❌ dev_check failed")
        return code

    code = run([sys.executable, "-m", "app.jigsaw.main", "1.5", "1.0", "2.0", "--margin", "0.02"])
    if code != 0:
        print("\n❌ dev_check failed (layout smoke run)")
        return code

    print("\n✅ dev_check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
