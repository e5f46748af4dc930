from datetime import date

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, Field

from ..clipboard import (
    ClipboardWatcher,
    InProcessClipboardHost,
    RecentSnippets,
    get_clipboard_watcher,
)
from ..detection import detect_language
from ..models import ActivityData, Diary, DiaryRun, PublishResult, Snippet
from ..services import (
    DiaryCoordinator,
    DiaryGenerationError,
    create_diary_coordinator,
    diary_template,
)

router = APIRouter()

WATCHER_KEY = "api"

_recent_snippets = RecentSnippets()


def get_coordinator() -> DiaryCoordinator:
    return create_diary_coordinator()


def get_recent_snippets() -> RecentSnippets:
    return _recent_snippets


def get_watcher(
    recent: RecentSnippets = Depends(get_recent_snippets),
) -> ClipboardWatcher:
    watcher = get_clipboard_watcher(WATCHER_KEY, host=InProcessClipboardHost())
    if not watcher.active:
        watcher.remove_listener(recent)
        watcher.add_listener(recent)
        watcher.start()
    return watcher


class PublishRequest(BaseModel):
    title: str | None = None
    markdown: str = Field(min_length=1)


class PasteRequest(BaseModel):
    text: str


class PasteResponse(BaseModel):
    captured: bool
    snippet: Snippet | None = None


class DetectRequest(BaseModel):
    code: str


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/diary/collect", response_model=ActivityData)
async def collect(coordinator: DiaryCoordinator = Depends(get_coordinator)):
    return await coordinator.collect_activities()


@router.post("/diary/generate", response_model=Diary)
async def generate(
    activity: ActivityData | None = Body(default=None),
    coordinator: DiaryCoordinator = Depends(get_coordinator),
):
    try:
        return await coordinator.generate_diary(activity)
    except DiaryGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/diary/template")
async def template():
    """Blank diary for writing today's entry by hand before publishing it."""
    return {"markdown": diary_template(date.today())}


@router.post("/diary/publish", response_model=PublishResult)
async def publish(
    request: PublishRequest,
    coordinator: DiaryCoordinator = Depends(get_coordinator),
):
    diary = coordinator.build_diary(request.markdown, title=request.title)
    return await coordinator.publish_diary(diary)


@router.post("/diary/run", response_model=DiaryRun)
async def run(coordinator: DiaryCoordinator = Depends(get_coordinator)):
    try:
        return await coordinator.create_and_publish_diary()
    except DiaryGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/clipboard/paste", response_model=PasteResponse)
async def paste(
    request: PasteRequest, watcher: ClipboardWatcher = Depends(get_watcher)
):
    snippet = watcher.handle_paste(request.text)
    return PasteResponse(captured=snippet is not None, snippet=snippet)


@router.get("/clipboard/recent", response_model=list[Snippet])
async def recent_snippets(recent: RecentSnippets = Depends(get_recent_snippets)):
    return recent.items()


@router.post("/detect")
async def detect(request: DetectRequest):
    return {"language": detect_language(request.code)}
