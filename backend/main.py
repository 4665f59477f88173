from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import drill, verbs
from core.config import settings
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from core.errors import register_error_handlers
from languages.spanish import get_paradigms

# Initialize logging before anything else
configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="Conjugar API starting up")
    paradigms = get_paradigms()
    app.state.drill = drill.new_session()
    log.info("drill_ready", verbs=len(paradigms), default_verb=settings.DEFAULT_VERB)

    yield

    log.info("shutdown", message="Conjugar API shutting down")


app = FastAPI(
    title="Conjugar API",
    description="Spanish verb conjugation drill: copy the shown form, then name its person, number, mood and tense",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(verbs.router, prefix="/api/verbs", tags=["verbs"])
app.include_router(drill.router, prefix="/api/drill", tags=["drill"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
