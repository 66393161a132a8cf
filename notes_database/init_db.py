"""
Database initialization script.

Run this script to create all required tables in the database.
"""
from notes_database.db import get_database_url, make_engine
from notes_database.models import Base


# PUBLIC_INTERFACE
def init_db(engine):
    """Initializes the database by creating all tables if they do not exist."""
    Base.metadata.create_all(bind=engine)


if __name__ == "__main__":
    init_db(make_engine(get_database_url()))
    print("Database tables created successfully.")
