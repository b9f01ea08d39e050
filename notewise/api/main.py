import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notewise.api.routes.review import router as review_router
from notewise.api.routes.summaries import router as summaries_router
from notewise.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Notewise API",
    description="Offline transcript summaries, flashcards and spaced-repetition scheduling",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:8081",
    ],
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(summaries_router)
app.include_router(review_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy", "provider": settings.ai_provider.value}
