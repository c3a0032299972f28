"""
Env File Dump
=============

Prints the key/value pairs of an env file as a JSON object.

Usage:
    python extract_env.py [path-to-env]

Defaults to ./.env.local next to this script.
"""

import sys
import json
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

DEFAULT_ENV_PATH = Path(__file__).parent / ".env.local"


def extract_env(path: Path) -> dict[str, Optional[str]]:
    """Parse an env file without touching os.environ."""
    return dict(dotenv_values(path))


def main(argv: list[str]) -> int:
    env_path = Path(argv[1]) if len(argv) > 1 else DEFAULT_ENV_PATH
    if not env_path.exists():
        print(f"File not found: {env_path}", file=sys.stderr)
        return 1

    print(json.dumps(extract_env(env_path), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
