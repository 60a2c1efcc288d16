"""
Create a user without going through the web signup. Run from project root:
  python -m taskboard.scripts.create_user USERNAME PASSWORD FULL_NAME EMAIL
Example:
  python -m taskboard.scripts.create_user alice pw1 "Alice A" a@x.com
"""
import argparse
import logging
import sys

from taskboard.core.database import SessionLocal, init_db
from taskboard.services.errors import TaskboardError
from taskboard.services.users import UserRepository

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Taskboard user.")
    parser.add_argument("username")
    parser.add_argument("password")
    parser.add_argument("full_name")
    parser.add_argument("email")
    args = parser.parse_args(argv)

    init_db()
    db = SessionLocal()
    try:
        user_id = UserRepository(db).create_user(
            args.username.strip(), args.password, args.full_name.strip(), args.email.strip()
        )
    except TaskboardError as e:
        print(f"Could not create user '{args.username}': {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{args.username}' with id {user_id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
