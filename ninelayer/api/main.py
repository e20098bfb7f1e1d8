import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from ninelayer.db.base import init_db
from ninelayer.api.routes import router

@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    init_db()
    yield

app = FastAPI(title="Nine Layer Analyzer", lifespan=lifespan)
app.include_router(router)

@app.get("/")
def home():
    return {"ok": True, "app": "Nine Layer Analyzer"}
