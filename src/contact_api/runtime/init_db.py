"""Database initialization script."""

from src.contact_api.core.services.database.db_session import DbSessionService


def init_db() -> None:
    """Create all database tables."""
    db_service = DbSessionService()
    try:
        db_service.create_all()
    finally:
        db_service.close()


if __name__ == "__main__":
    init_db()
