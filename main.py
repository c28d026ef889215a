from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os
import logging
from dotenv import load_dotenv

from db import Base, engine
from college_matcher import models  # noqa: F401  registers the athlete tables
from college_matcher.routes import router as college_matcher_router

load_dotenv()

logging.basicConfig(level=logging.INFO)
logging.info("College matcher starting")

app = FastAPI(title="College Matcher")

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ALLOW_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(college_matcher_router)


@app.get("/", tags=["health"])
def root():
    return {"status": "ok"}
