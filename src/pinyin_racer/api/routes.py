"""REST API routes for the pinyin game."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import AliasChoices, BaseModel, Field

from pinyin_racer.config import get_settings
from pinyin_racer.errors import InvalidArgument
from pinyin_racer.game.service import GameService
from pinyin_racer.game.tasks import TaskGenerator
from pinyin_racer.storage.progress import JsonFileBackend, ProgressStore

logger = structlog.get_logger()
router = APIRouter(prefix="/api")


class SetLevelRequest(BaseModel):
    level: int


class UpdateTimeRequest(BaseModel):
    level: int
    seconds: float


class SubmitAnswerRequest(BaseModel):
    level: int
    correct: bool
    key: str | None = None
    letter: str | None = None  # level 2 clients send the letter
    syllable: str | None = None  # level 3 clients send the syllable
    answer_time: float = Field(
        default=0.0, validation_alias=AliasChoices("answer_time", "answerTime")
    )

    @property
    def resolved_key(self) -> str | None:
        return self.key or self.letter or self.syllable


def get_game_service() -> GameService:
    """Build the service over the configured progress file."""
    settings = get_settings()
    store = ProgressStore(JsonFileBackend(settings.progress_path))
    generator = TaskGenerator(review_probability=settings.review_probability)
    return GameService(store, generator, best_times_cap=settings.best_times_cap)


def _bad_request(err: InvalidArgument) -> HTTPException:
    logger.info("invalid_request", error=str(err))
    return HTTPException(status_code=400, detail=str(err))


@router.get("/letters")
async def list_letters(service: GameService = Depends(get_game_service)) -> list[dict]:
    """Full flashcard table for level 1."""
    return [entry.model_dump(mode="json") for entry in service.letters()]


@router.get("/user-progress")
async def user_progress(service: GameService = Depends(get_game_service)) -> dict:
    return service.progress().model_dump(mode="json")


@router.post("/reset")
async def reset_progress(service: GameService = Depends(get_game_service)) -> dict:
    progress = service.reset()
    return {"success": True, "progress": progress.model_dump(mode="json")}


@router.post("/set-level")
async def set_level(
    body: SetLevelRequest, service: GameService = Depends(get_game_service)
) -> dict:
    try:
        progress = service.set_level(body.level)
    except InvalidArgument as e:
        raise _bad_request(e) from e
    return {"success": True, "level": progress.current_level}


@router.post("/update-time")
async def update_time(
    body: UpdateTimeRequest, service: GameService = Depends(get_game_service)
) -> dict:
    try:
        time_spent = service.update_time(body.level, body.seconds)
    except InvalidArgument as e:
        raise _bad_request(e) from e
    return {"success": True, "timeSpent": time_spent}


@router.get("/get-task")
async def get_task(
    level: int = Query(...), service: GameService = Depends(get_game_service)
) -> dict:
    """Generate one quiz item for the requested level."""
    try:
        task = service.get_task(level)
    except InvalidArgument as e:
        raise _bad_request(e) from e
    return task.model_dump(mode="json", by_alias=True)


@router.post("/submit-answer")
async def submit_answer(
    body: SubmitAnswerRequest, service: GameService = Depends(get_game_service)
) -> dict:
    try:
        result = service.submit_answer(
            body.level, body.correct, body.resolved_key, body.answer_time
        )
    except InvalidArgument as e:
        raise _bad_request(e) from e
    return {"success": True, **result.model_dump(by_alias=True)}


@router.get("/stats")
async def get_stats(service: GameService = Depends(get_game_service)) -> dict:
    return service.stats().model_dump(mode="json", by_alias=True)


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
