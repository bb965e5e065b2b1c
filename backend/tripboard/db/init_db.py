"""
Database initialization script.

Creates the tables and seeds the sample members if the store is empty:

    python -m tripboard.db.init_db
"""
from tripboard.db.session import SessionLocal, init_db
from tripboard.services.member_service import seed_members


def main() -> int:
    """Create tables and seed members. Returns the number of seeded rows."""
    init_db()
    db = SessionLocal()
    try:
        return seed_members(db)
    finally:
        db.close()


if __name__ == "__main__":
    print("Initializing database...")
    inserted = main()
    print(f"Database initialized successfully! ({inserted} members seeded)")
