#!/usr/bin/env python3
from __future__ import annotations

import os
import subprocess
import sys


def run(cmd: list[str], env: dict[str, str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd, check=False, env=env).returncode


def main() -> int:
    # Qt layout tests need no display.
    env = dict(os.environ)
    env.setdefault("QT_QPA_PLATFORM", "offscreen")

    code = run([sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", "test_*.py"], env)
    if code != 0:
        print("\n❌ dev_check failed")
        return code

    print("\n✅ dev_check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
