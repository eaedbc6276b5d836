from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sponsor_service.core.config import settings

# The engine owns the connection pool for the configured database.
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

# One session per request. Every sponsor mutation runs inside the
# transaction the session opens on first use, so nothing is written
# until the service calls commit().
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # Always close the session, even if the endpoint raised.
        db.close()
