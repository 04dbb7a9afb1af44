"""
Create a user without going through /register. Run from project root:
  python -m maintenance.scripts.create_user USERNAME PASSWORD [--first-name F] [--last-name L] [--email E]
Example:
  python -m maintenance.scripts.create_user admin your-secure-password --email admin@example.com
"""
import argparse
import sys

from sqlalchemy.orm import Session

from maintenance.core.config import get_settings
from maintenance.core.database import build_engine, build_session_factory
from maintenance.models.user import User
from maintenance.schemas.auth import UserCreate
from maintenance.services.users import UserWriteError, register_user


def create_user(db: Session, data: UserCreate) -> int:
    """Insert the user; return a process exit code and report on stdout/stderr."""
    existing = db.query(User).filter(User.username == data.username).first()
    if existing:
        print(f"User '{data.username}' already exists.", file=sys.stderr)
        return 1
    try:
        user = register_user(db, data)
    except UserWriteError as e:
        print(f"Could not create user '{data.username}': {e}", file=sys.stderr)
        return 1
    print(f"Created user '{user.username}' with id {user.id}.")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a maintenance master user.")
    parser.add_argument("username", help="Unique username")
    parser.add_argument("password", help="Password (stored as a bcrypt hash)")
    parser.add_argument("--first-name", default="")
    parser.add_argument("--last-name", default="")
    parser.add_argument("--email", default="")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username:
        print("Username must not be empty.", file=sys.stderr)
        return 1

    data = UserCreate(
        username=username,
        password=args.password,
        first_name=args.first_name,
        last_name=args.last_name,
        email=args.email,
    )
    session_factory = build_session_factory(build_engine(get_settings()))
    db = session_factory()
    try:
        return create_user(db, data)
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
