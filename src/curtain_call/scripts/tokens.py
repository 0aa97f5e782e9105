# src/curtain_call/scripts/tokens.py
"""Print a session access token for a user, for local testing.

Usage:
    python -m curtain_call.scripts.tokens <user_id>
"""

import argparse
import sys

from curtain_call.core.security import create_access_token
from curtain_call.db.session import SessionLocal
from curtain_call.repositories.user_repo import UserRepository


def issue_token(user_id: int) -> str | None:
    """Return an access token for ``user_id`` or None if the user does not exist."""
    db = SessionLocal()
    try:
        if UserRepository(db).fetch_by_id(user_id) is None:
            return None
    finally:
        db.close()
    return create_access_token(user_id)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("user_id", type=int)
    args = parser.parse_args(argv)

    token = issue_token(args.user_id)
    if token is None:
        print(f"User {args.user_id} not found", file=sys.stderr)
        return 1
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
