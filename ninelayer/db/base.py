from sqlmodel import SQLModel, create_engine, Session
from ninelayer.config import settings
import os

# SQLite file needs its folder to exist
if settings.db_dsn.startswith("sqlite:///./data/"):
    os.makedirs("data", exist_ok=True)

engine = create_engine(settings.db_dsn, echo=False)

def init_db(bind=None):
    # import models so SQLModel registers the tables
    from ninelayer.db import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)

# FastAPI dependency: generator yielding one session per request
def get_session():
    with Session(engine) as session:
        yield session
