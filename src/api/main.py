import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes.conversation import router as conversation_router
from src.api.routes.document import router as document_router
from src.api.routes.image import router as image_router
from src.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="AI Skills Playground API",
    description="Conversation analysis, image analysis, and document summarization",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:8501",
    ],
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(conversation_router)
app.include_router(image_router)
app.include_router(document_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
