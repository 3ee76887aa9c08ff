#!/usr/bin/env python3
# backend/scripts/seed_demo.py
import argparse

from scanstock.database import Base, WriteSessionLocal, write_engine
from scanstock.apps.items.seed import seed_demo_items
from scanstock.apps.items.store import SqlItemStore


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the demo item catalogue.")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables first (local SQLite databases without migrations).",
    )
    args = parser.parse_args()

    if args.create_tables:
        Base.metadata.create_all(bind=write_engine)

    db = WriteSessionLocal()
    try:
        created = seed_demo_items(SqlItemStore(db))
        if created:
            print(f"[OK] Seeded {created} demo items")
        else:
            print("[INFO] Items table is not empty; nothing seeded")
    finally:
        db.close()


if __name__ == "__main__":
    main()
