"""
main.py
-------
Walk-through of every UserRepository operation against the database
started by `docker compose up -d`.

Responsibilities:
    - Open the database connection and make sure the schema exists.
    - Run each create / read / update / delete operation in turn and show the result.
    - Close the connection on every exit path.
"""

from psycopg2 import errors

from db.connection import close_connection, get_connection
from db.init_db import create_tables
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _show(title: str, users: list[User]) -> None:
    print(f"\n── {title} ({len(users)}) ──")
    for user in users:
        print(f"  {user}")


def run_demo(repo: UserRepository) -> None:
    """Exercise the repository step by step, printing what the database holds."""

    # ── 1. Start from an empty table ──────────────────────
    repo.delete_all()

    # ── 2. Create ─────────────────────────────────────────
    repo.add_many([
        User(name="Alice", email="alice@example.com"),
        User(name="Bob", email="bob@example.com"),
        User(name="Carol", email="carol@example.com"),
    ])
    repo.add(User(name="Dave", email="dave@example.com"))
    users = repo.get_all()
    _show("After inserts", users)

    # ── 3. Read ───────────────────────────────────────────
    first = users[0]
    print(f"\nget_by_id({first.id}) -> {repo.get_by_id(first.id)}")
    print(f"get_by_id(-1) -> {repo.get_by_id(-1)}")

    # ── 4. Update ─────────────────────────────────────────
    first.name = f"{first.name} Updated"
    repo.update(first)
    renamed = [User(id=u.id, name=u.name.upper(), email=u.email) for u in users[1:3]]
    repo.update_many(renamed)
    print(f"update(id=-1) matched a row: {repo.update(User(id=-1, name='Nobody', email='nobody@example.com'))}")
    _show("After updates", repo.get_all())

    # ── 5. Constraint violation ───────────────────────────
    try:
        repo.add(User(name="Alice Again", email="alice@example.com"))
    except errors.UniqueViolation as e:
        print(f"\nDuplicate email rejected by the database: {e.pgerror.strip()}")

    # ── 6. Delete ─────────────────────────────────────────
    repo.delete(users[-1].id)
    _show("After deleting one", repo.get_all())
    removed = repo.delete_all()
    print(f"\ndelete_all() removed {removed} rows")
    _show("After delete_all", repo.get_all())


def main() -> None:
    """Connect, prepare the schema and run the walk-through."""
    configure_logging()
    logger.info("Connecting to the database...")
    conn = get_connection()
    try:
        create_tables(conn)
        run_demo(UserRepository(conn))
    finally:
        close_connection(conn)
    logger.info("Done.")


if __name__ == "__main__":
    main()
