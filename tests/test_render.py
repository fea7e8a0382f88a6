from core.render import EMPTY_TEXT, RUNNING_TEXT, build_view, is_error_styled, render_output
from schemas.code import ExecutionResult


def test_compilation_error_is_prefixed() -> None:
    text = render_output(ExecutionResult.compilation_error("main.cpp:3: expected ';'"))

    assert text == "Compilation Error:\nmain.cpp:3: expected ';'"
    assert is_error_styled(text)


def test_transport_error_is_prefixed() -> None:
    text = render_output(ExecutionResult.transport_error("Connection refused"))

    assert text == "Error executing code: Connection refused"
    assert is_error_styled(text)


def test_program_printing_error_is_styled_as_error() -> None:
    session_result = ExecutionResult.success("Error count: 0")

    assert is_error_styled(render_output(session_result))


def test_view_before_first_run(session) -> None:
    view = build_view(session)

    assert view.output.state == "empty"
    assert view.output.text == EMPTY_TEXT
    assert view.run_button.label == "Run Code"
    assert view.run_button.disabled is False
    assert [option.value for option in view.languages] == ["java", "cpp", "javascript"]
    assert view.font_size == 17


def test_view_while_running(session) -> None:
    session.is_running = True

    view = build_view(session)

    assert view.output.state == "running"
    assert view.output.text == RUNNING_TEXT
    assert view.run_button.label == "Running..."
    assert view.run_button.disabled is True


def test_view_flags_misclassified_success(session) -> None:
    session.result = ExecutionResult.success("Error: user-level message")

    view = build_view(session)

    assert view.output.state == "ready"
    assert view.output.error_styled is True
    assert view.output.failed is False


def test_view_after_failed_run(session) -> None:
    session.result = ExecutionResult.compilation_error("undefined reference to main")

    view = build_view(session)

    assert view.output.error_styled is True
    assert view.output.failed is True
