from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from tourpro.config import settings

Base = declarative_base()

connect_args = {}
if settings.database_url.startswith("sqlite"):
    # SQLite connections are handed between FastAPI's worker threads
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    connect_args=connect_args
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """Create all tables registered on Base"""
    import tourpro.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
