from core.languages import LANGUAGES
from db.playground import Session
from schemas.code import (
    ExecutionResult,
    LanguageOption,
    OutputPanel,
    PlaygroundView,
    RunButton,
)

RUNNING_TEXT = "Executing Code..."
EMPTY_TEXT = "Run your code to see the output here..."


def render_output(result: ExecutionResult) -> str:
    if result.kind == "compilation_error":
        return f"Compilation Error:\n{result.text}"
    if result.kind == "transport_error":
        return f"Error executing code: {result.text}"
    return result.text


def is_error_styled(text: str) -> bool:
    """
    Display rule for the output panel. Plain substring match, so a program
    that prints "Error" is styled as failed too; `OutputPanel.failed` carries
    the real outcome.
    """
    return "Error" in text or "Compilation Error" in text


def output_panel(session: Session) -> OutputPanel:
    if session.is_running:
        return OutputPanel(state="running", text=RUNNING_TEXT, error_styled=False, failed=False)
    if session.result is None:
        return OutputPanel(state="empty", text=EMPTY_TEXT, error_styled=False, failed=False)

    text = render_output(session.result)
    return OutputPanel(
        state="ready",
        text=text,
        error_styled=is_error_styled(text),
        failed=session.result.kind != "success",
    )


def run_button(session: Session) -> RunButton:
    if session.is_running:
        return RunButton(label="Running...", disabled=True)
    return RunButton(label="Run Code", disabled=False)


def build_view(session: Session) -> PlaygroundView:
    return PlaygroundView(
        language=session.language,
        languages=[
            LanguageOption(value=name, label=lang.label) for name, lang in LANGUAGES.items()
        ],
        code=session.source_text,
        inputs=session.program_input,
        font_size=session.font_size,
        font_size_min=session.font_size_min,
        font_size_max=session.font_size_max,
        is_running=session.is_running,
        run_button=run_button(session),
        output=output_panel(session),
    )
