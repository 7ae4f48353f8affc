#!/usr/bin/env python
"""Upgrade the catalog schema to head; pass --seed to load demo data afterwards."""
import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="load demo ingredients and recipes after migrating")
    args = parser.parse_args()

    repo_root = Path(__file__).resolve().parents[1]
    env_path = repo_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    migrations_url = os.getenv("MIGRATIONS_DATABASE_URL")
    if migrations_url:
        os.environ["DATABASE_URL"] = migrations_url

    result = subprocess.run([sys.executable, "-m", "alembic", "upgrade", "head"], cwd=repo_root)
    if result.returncode != 0 or not args.seed:
        sys.exit(result.returncode)

    result = subprocess.run([sys.executable, str(repo_root / "scripts" / "seed_data.py")], cwd=repo_root)
    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
