import logging

import httpx
from core.config import settings
from db.playground import Session
from schemas.code import ExecutionResult, RunRequest

logger = logging.getLogger(__name__)

NO_OUTPUT = "Error: No output received"


def build_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.EXECUTION_TIMEOUT_SECONDS)


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class RunController:
    """
    Sends the session's code to the remote execution service, one run at a time.

    Sample request body:
    {
        "code": "console.log(\"Hello, World!\");",
        "language": "javascript",
        "inputs": ""
    }

    The service answers with {"output": "..."} or {"error": "..."}.
    """

    def __init__(self, client: httpx.AsyncClient, url: str = settings.EXECUTION_URL):
        self.client = client
        self.url = url

    async def run(self, session: Session) -> None:
        request = self.begin(session)
        if request is not None:
            await self.complete(session, request)

    def begin(self, session: Session) -> RunRequest | None:
        """Mark the session as running and capture what will be sent, or None if a run is in flight."""
        if session.is_running:
            logger.info("Run ignored, a request is already in flight")
            return None

        session.is_running = True
        # later edits must not leak into the request already sent
        return RunRequest(
            code=session.source_text,
            language=session.language,
            inputs=session.program_input,
        )

    async def complete(self, session: Session, request: RunRequest) -> None:
        try:
            session.result = await self.execute(request)
        finally:
            session.is_running = False

    async def execute(self, request: RunRequest) -> ExecutionResult:
        logger.debug("Sending %s run request to %s", request.language, self.url)
        try:
            response = await self.client.post(self.url, json=request.model_dump())
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("Run request failed: %s", _describe(e))
            return ExecutionResult.transport_error(_describe(e))

        logger.debug("Execution service responded: %r", body)
        if not isinstance(body, dict):
            return ExecutionResult.transport_error(
                f"Unexpected response from execution service: {body!r}"
            )

        error = body.get("error")
        if error:
            return ExecutionResult.compilation_error(str(error))

        output = body.get("output")
        return ExecutionResult.success(str(output) if output else NO_OUTPUT)
