#!/usr/bin/env python3
"""
Job Catalog Import Script for SkillMatch

Loads a catalog file shaped like ``{"Job Title": {"courseId": ...,
"requiredSkills": [...]}}`` into the job store, upserting by title.

Usage:
    python scripts/import_catalog.py data/jobs.json
    python scripts/import_catalog.py data/jobs.json --database-url sqlite+aiosqlite:///./skillmatch.db
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Dict, Optional

# Allow running from the backend directory without installation
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.database import DatabaseManager  # noqa: E402
from app.core.exceptions import BaseApplicationException  # noqa: E402
from app.repositories.job_repository import JobRepository  # noqa: E402
from app.services.job_service import JobService  # noqa: E402


async def import_catalog(path: str, database_url: Optional[str] = None) -> Dict[str, int]:
    """Import a catalog file and return created/updated counts."""
    database = DatabaseManager(database_url)
    await database.init_database()
    try:
        return await JobService(JobRepository(database)).import_catalog_file(path)
    finally:
        await database.close_connections()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Import a job catalog into SkillMatch")
    parser.add_argument("path", help="Catalog JSON file")
    parser.add_argument("--database-url", help="Overrides DATABASE_URL")
    args = parser.parse_args(argv)

    try:
        counts = asyncio.run(import_catalog(args.path, args.database_url))
    except BaseApplicationException as e:
        print(f"Import failed: {e.message}", file=sys.stderr)
        return 1

    print(f"Imported catalog: {counts['created']} created, {counts['updated']} updated")
    return 0


if __name__ == "__main__":
    sys.exit(main())
