import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from resume_parser.config import settings
from resume_parser.routers import resume

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Resume Parser API",
    description="FastAPI backend to parse resume documents into structured data.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(resume.router, prefix="/api/v1", tags=["Resume Parsing"])


@app.get("/")
async def root():
    return {"message": "Resume Parser API is running. Use endpoints under /api/v1/"}


# Local development runner
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("resume_parser.main:app", host="127.0.0.1", port=8000, reload=True)
