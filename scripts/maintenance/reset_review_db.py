"""
Reset the review database.

DANGEROUS: This deletes all review items and their schedules!
Only use when you want to start fresh for testing.

Usage:
    python -m scripts.maintenance.reset_review_db
"""

from dotenv import load_dotenv

from core import sm2
from core.logging_config import configure_logging


def main():
    load_dotenv()
    configure_logging()

    print("=" * 60)
    print("WARNING: Reset Review Database")
    print("=" * 60)
    print()
    print("This will DELETE all review data:")
    print("  - All review items (titles and content)")
    print("  - All schedules (ease factor, interval, repetitions)")
    print()
    if sm2.is_test_mode():
        print("TEST MODE is on: the test database will be reset.")
        print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting database...")
        engine = sm2.get_engine()
        try:
            sm2.reset_db(engine)
        finally:
            engine.dispose()
        print("✓ Database reset complete!")
        print("\nThe database now has an empty review_items table.")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
