"""Raise a notification for a user from the command line."""

from __future__ import annotations

import argparse

from cornerstone.application.use_cases.notifications import create_notification
from cornerstone.infrastructure.database import SessionLocal, initialize_database
from cornerstone.infrastructure.repositories import UserRepository


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create a notification for a Cornerstone OS user.",
    )
    parser.add_argument("email", help="Email address of the recipient")
    parser.add_argument("title", help="Short notification title")
    parser.add_argument("--body", default=None, help="Optional longer text")
    parser.add_argument("--category", default=None, help="Optional classification tag")
    parser.add_argument("--link-href", default=None, help="Optional link target")
    parser.add_argument("--link-label", default=None, help="Optional link label")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    initialize_database()

    with SessionLocal() as session:
        owner = UserRepository(session).get_by_email(args.email)
        if owner is None:
            raise SystemExit(f"No user registered with {args.email}")

        result = create_notification(
            session,
            owner_id=owner.id,
            title=args.title,
            body=args.body,
            category=args.category,
            link_href=args.link_href,
            link_label=args.link_label,
        )

    if result.error:
        raise SystemExit(f"Could not create the notification: {result.error}")
    print(f"Notification {result.id} created for {args.email}")


if __name__ == "__main__":
    main()
