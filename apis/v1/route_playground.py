from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from core.render import build_view
from db.base import get_runner, get_session
from db.playground import InvalidLanguage, Session
from db.sandbox import RunController
from schemas.code import (
    CodeUpdate,
    FontSizeUpdate,
    InputUpdate,
    LanguageUpdate,
    PlaygroundView,
)

router = APIRouter()


@router.get("/", response_model=PlaygroundView)
async def get_playground(session: Session = Depends(get_session)) -> PlaygroundView:
    return build_view(session)


# handlers that write the code snapshot are sync so the store call runs in the threadpool
@router.put("/language", response_model=PlaygroundView)
def change_language(
    update: LanguageUpdate, session: Session = Depends(get_session)
) -> PlaygroundView:
    try:
        session.set_language(update.language)
    except InvalidLanguage as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return build_view(session)


@router.put("/code", response_model=PlaygroundView)
def change_code(
    update: CodeUpdate, session: Session = Depends(get_session)
) -> PlaygroundView:
    session.set_source_text(update.code)
    return build_view(session)


@router.put("/inputs", response_model=PlaygroundView)
async def change_inputs(
    update: InputUpdate, session: Session = Depends(get_session)
) -> PlaygroundView:
    session.set_program_input(update.inputs)
    return build_view(session)


@router.put("/font-size", response_model=PlaygroundView)
async def change_font_size(
    update: FontSizeUpdate, session: Session = Depends(get_session)
) -> PlaygroundView:
    session.set_font_size(update.font_size)
    return build_view(session)


@router.post("/run", response_model=PlaygroundView, status_code=status.HTTP_202_ACCEPTED)
async def run_code(
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    runner: RunController = Depends(get_runner),
) -> PlaygroundView:
    # claimed before responding so the returned view already shows the run in flight
    request = runner.begin(session)
    if request is not None:
        background_tasks.add_task(runner.complete, session, request)
    return build_view(session)
