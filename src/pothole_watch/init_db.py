# src/pothole_watch/init_db.py
"""Create the database schema directly, bypassing Alembic (local development)."""

from pothole_watch.db.session import create_tables


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


if __name__ == "__main__":
    init_db()
    print("Database initialized.")
