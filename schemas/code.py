from pydantic import BaseModel, Field
from typing import Literal


class RunRequest(BaseModel):
    """Body sent to the remote execution service."""

    code: str
    language: str
    inputs: str = ""


class ExecutionResult(BaseModel):
    kind: Literal["success", "compilation_error", "transport_error"]
    text: str

    @classmethod
    def success(cls, output: str) -> "ExecutionResult":
        return cls(kind="success", text=output)

    @classmethod
    def compilation_error(cls, error: str) -> "ExecutionResult":
        return cls(kind="compilation_error", text=error)

    @classmethod
    def transport_error(cls, message: str) -> "ExecutionResult":
        return cls(kind="transport_error", text=message)


class LanguageUpdate(BaseModel):
    language: str


class CodeUpdate(BaseModel):
    code: str


class InputUpdate(BaseModel):
    inputs: str


class FontSizeUpdate(BaseModel):
    font_size: float = Field(allow_inf_nan=False)


class LanguageOption(BaseModel):
    value: str
    label: str


class RunButton(BaseModel):
    label: str
    disabled: bool


class OutputPanel(BaseModel):
    state: Literal["empty", "running", "ready"]
    text: str
    # substring heuristic kept for display compatibility, see `failed`
    error_styled: bool
    failed: bool


class PlaygroundView(BaseModel):
    language: str
    languages: list[LanguageOption]
    code: str
    inputs: str
    font_size: int
    font_size_min: int
    font_size_max: int
    is_running: bool
    run_button: RunButton
    output: OutputPanel
