"""FastAPI app entrypoint."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripsplit.config import ALLOWED_ORIGINS, LOG_LEVEL
from tripsplit.routers import settlements

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Trip Settlement API",
    description="Split shared trip expenses and work out who pays whom.",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(settlements.router, prefix="/api")


@app.get("/")
def root():
    return {"message": "Trip Settlement API", "docs": "/docs"}


@app.get("/api/health")
def health():
    return {"status": "ok"}
