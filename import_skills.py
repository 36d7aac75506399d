#!/usr/bin/env python3
"""
import_skills.py - CLI for importing user skill ratings from a CSV feed.

Runs the bulk import (sync user → parse skill list → add or update each
rating) without requiring the FastAPI server to be running.

The feed has an ``email`` column and a ``skills`` column holding
``[Technology];rating`` pairs separated by semicolons.

Usage:
    uv run python import_skills.py <feed.csv> <caller-google-id>

Example:
    uv run python import_skills.py skills.csv 1098765432
"""

from __future__ import annotations

import os
import sys
import time

# Ensure the src/ directory is on the path so package imports resolve correctly
# when running this script directly from the repo root.
_SRC = os.path.join(os.path.dirname(__file__), "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


def main() -> None:
    if len(sys.argv) < 3:
        print("Usage: uv run python import_skills.py <feed.csv> <caller-google-id>")
        sys.exit(1)

    feed_path = sys.argv[1]
    caller_id = sys.argv[2].strip()
    start = time.time()

    # Deferred so sys.path manipulation above takes effect first.
    from techgallery.config import settings
    from techgallery.database import Base, SessionLocal, engine
    from techgallery.exceptions import TechGalleryError
    from techgallery.repositories.skill_store import SkillStore
    from techgallery.schemas.skill import CallerIdentity
    from techgallery.services.people_provider import PeopleProviderClient
    from techgallery.services.skill_import import read_feed
    from techgallery.services.skill_service import SkillService
    from techgallery.services.technology_catalog import TechnologyCatalog
    from techgallery.services.user_directory import UserDirectory

    print(f"🗄️   Database  : {settings.database_url}")
    print(f"📄  Feed      : {feed_path}")
    print()

    try:
        records = read_feed(feed_path)
    except (OSError, TechGalleryError) as exc:
        print(f"❌  Cannot read feed: {getattr(exc, 'message', exc)}", file=sys.stderr)
        sys.exit(1)

    os.makedirs(settings.data_root, exist_ok=True)
    Base.metadata.create_all(bind=engine)

    provider = None
    if settings.people_api_url:
        provider = PeopleProviderClient(
            settings.people_api_url, timeout_seconds=settings.people_api_timeout_seconds
        )

    db = SessionLocal()
    try:
        service = SkillService(
            store=SkillStore(db),
            users=UserDirectory(db, provider=provider),
            technologies=TechnologyCatalog(db),
        )
        try:
            result = service.import_user_skill(records, CallerIdentity(user_id=caller_id))
        except TechGalleryError as exc:
            print(f"❌  Import failed: {exc.message}", file=sys.stderr)
            sys.exit(1)

        elapsed = round(time.time() - start, 1)
        print("✅  Import complete!")
        print(f"    Users    : {result.users_processed}")
        print(f"    Skills   : {result.skills_imported}")
        print(f"    Time     : {elapsed}s")
    finally:
        db.close()


if __name__ == "__main__":
    main()
