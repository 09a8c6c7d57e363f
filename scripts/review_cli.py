"""
Command line interface for the review engine.

Usage:
    python -m scripts.review_cli add --title "Krebs cycle" --content "Citrate, isocitrate, ..."
    python -m scripts.review_cli list
    python -m scripts.review_cli due
    python -m scripts.review_cli review              # interactive
    python -m scripts.review_cli review --quality 4  # grade every due item the same
    python -m scripts.review_cli delete ITEM_ID

The database comes from --database-url, or DATABASE_URL in the environment / .env.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional

import structlog
from dotenv import load_dotenv

from core import sm2
from core.logging_config import configure_logging

logger = structlog.get_logger(__name__)


GRADE_KEYS = {
    "1": sm2.Quality.FORGOT,
    "f": sm2.Quality.FORGOT,
    "3": sm2.Quality.HARD,
    "h": sm2.Quality.HARD,
    "4": sm2.Quality.GOOD,
    "g": sm2.Quality.GOOD,
    "5": sm2.Quality.EASY,
    "e": sm2.Quality.EASY,
}


def parse_grade(raw: str) -> Optional[int]:
    """
    Map interactive input to a quality grade.

    Accepts any digit 0-5 or the button initials f/h/g/e. Returns None otherwise.
    """
    raw = raw.strip().lower()
    if raw in GRADE_KEYS:
        return int(GRADE_KEYS[raw])
    if raw in {"0", "2"}:
        return int(raw)
    return None


def add_item(controller: sm2.ReviewSessionController, args: argparse.Namespace) -> int:
    item = controller.add_item(args.user, args.title, content=args.content, task_id=args.task_id)
    print(f"Added review item {item.id}.")
    return 0


def list_items(controller: sm2.ReviewSessionController, args: argparse.Namespace) -> int:
    items = controller.store.list_by_owner(args.user)
    if not items:
        print("No review items.")
        return 0

    for item in items:
        print(
            f"[{item.id}] {item.title}\n"
            f"  next {item.next_review_at:%Y-%m-%d %H:%M} UTC, "
            f"interval={item.interval_days}d reps={item.repetitions} ease={item.ease_factor:.2f}"
        )
    return 0


def show_due(controller: sm2.ReviewSessionController, args: argparse.Namespace) -> int:
    print(f"{controller.due_count(args.user)} due")
    return 0


def _ask_grade(read_input: Callable[[str], str]) -> Optional[int]:
    """Prompt until a valid grade is entered. Returns None when the user quits."""
    while True:
        raw = read_input("Grade: (f)orgot 1, (h)ard 3, (g)ood 4, (e)asy 5, q to quit: ")
        if raw.strip().lower() == "q":
            return None
        quality = parse_grade(raw)
        if quality is not None:
            return quality
        print("Invalid grade, try again.")


def review(
    controller: sm2.ReviewSessionController,
    args: argparse.Namespace,
    read_input: Callable[[str], str] = input,
) -> int:
    item = controller.start_session(args.user)
    if item is None:
        print("All caught up! No reviews due right now.")
        return 0

    while item is not None:
        print(f"\n{item.title}")
        if args.quality is None:
            read_input("Press Enter to reveal...")
        if item.content:
            print(item.content)

        if args.quality is None:
            quality = _ask_grade(read_input)
            if quality is None:
                break
        else:
            quality = args.quality

        updated = controller.submit_grade(item.id, quality)
        print(f"Scored {quality}, next review on {updated.next_review_at:%Y-%m-%d}")
        item = controller.current_item()

    stats = controller.stats
    print(f"\nReviewed {stats.reviewed} item(s), recalled {stats.passed}.")
    return 0


def delete_item(controller: sm2.ReviewSessionController, args: argparse.Namespace) -> int:
    controller.delete_item(args.user, args.item_id)
    print(f"Deleted review item {args.item_id}.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spaced repetition review (SM-2).")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy database URL (default: DATABASE_URL).")
    parser.add_argument("--user", default=None, help="Owner id (default: DEFAULT_USER_ID).")
    sub = parser.add_subparsers(dest="command", required=True)

    p_add = sub.add_parser("add", help="Add one review item.")
    p_add.add_argument("--title", required=True, help="What do you want to remember?")
    p_add.add_argument("--content", default=None, help="Key points, facts, or concepts.")
    p_add.add_argument("--task-id", default=None, help="Task this item belongs to.")
    p_add.set_defaults(func=add_item)

    p_list = sub.add_parser("list", help="List all review items.")
    p_list.set_defaults(func=list_items)

    p_due = sub.add_parser("due", help="Show how many items are due.")
    p_due.set_defaults(func=show_due)

    p_review = sub.add_parser("review", help="Review due items.")
    p_review.add_argument(
        "--quality", type=int, choices=[0, 1, 2, 3, 4, 5], help="Apply one grade for non-interactive mode."
    )
    p_review.set_defaults(func=review)

    p_delete = sub.add_parser("delete", help="Delete a review item.")
    p_delete.add_argument("item_id", help="Item id (see `list`).")
    p_delete.set_defaults(func=delete_item)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    configure_logging()
    args = build_parser().parse_args(argv)
    if args.user is None:
        args.user = sm2.get_default_user_id()

    engine = sm2.get_engine(args.database_url)
    try:
        sm2.init_db(engine)
        controller = sm2.ReviewSessionController(
            sm2.SqlAlchemyReviewStore(engine),
            limit=sm2.get_session_limit(),
        )
        return args.func(controller, args)
    except sm2.ReviewError as exc:
        logger.warning("review command failed", command=args.command, user=args.user, error=type(exc).__name__)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
