#!/usr/bin/env python3
from __future__ import annotations

import subprocess
import sys

GALLERY = ["0.6678", "1.5086", "0.5623", "0.6666", "1.7396", "1.7396"]


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd, check=False).returncode


def main() -> int:
    code = run([sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", "test_*.py"])
    if code != 0:
        print("\n❌ dev_check failed (unit tests)")
        return code

    smoke = [
        sys.executable, "-m", "app.perfectgrid.main",
        "--full-width", "1526", "--min-height", "200", "--max-height", "444",
        "--min-item-width", "175", "--gap", "4", "--rounded",
    ]
    for ratio in GALLERY:
        smoke += ["--ratio", ratio]
    code = run(smoke)
    if code != 0:
        print("\n❌ dev_check failed (CLI smoke)")
        return code

    print("\n✅ dev_check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
