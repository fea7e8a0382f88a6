import logging
import math
from dataclasses import dataclass

from core.config import settings
from core.languages import LANGUAGES, is_supported, starter_code
from db.snapshot import SnapshotStore
from schemas.code import ExecutionResult

logger = logging.getLogger(__name__)


class InvalidLanguage(ValueError):
    def __init__(self, language: str):
        self.language = language
        super().__init__(
            f"Unsupported language {language!r}, expected one of: {', '.join(LANGUAGES)}"
        )


@dataclass
class Session:
    """
    Live state of the playground: what is in the editor, what will be fed to
    stdin, and the outcome of the last run.

    Every change to `source_text` is written to the snapshot store so the next
    session starts from it.
    """

    store: SnapshotStore
    language: str
    source_text: str
    program_input: str = ""
    font_size: int = 17
    font_size_min: int = 12
    font_size_max: int = 24
    result: ExecutionResult | None = None
    is_running: bool = False

    @classmethod
    def initialize(
        cls,
        store: SnapshotStore,
        default_language: str = settings.DEFAULT_LANGUAGE,
        font_size: int = settings.FONT_SIZE_DEFAULT,
        font_size_range: tuple[int, int] = (settings.FONT_SIZE_MIN, settings.FONT_SIZE_MAX),
    ) -> "Session":
        if not is_supported(default_language):
            raise InvalidLanguage(default_language)

        saved = store.load()
        if saved is None:
            logger.debug("No code snapshot found, starting from %s starter code", default_language)
            saved = starter_code(default_language)

        session = cls(
            store=store,
            language=default_language,
            source_text=saved,
            font_size_min=font_size_range[0],
            font_size_max=font_size_range[1],
        )
        session.set_font_size(font_size)
        return session

    def set_language(self, language: str) -> None:
        if not is_supported(language):
            raise InvalidLanguage(language)

        self.language = language
        # switching always discards the current code
        self.set_source_text(starter_code(language))

    def set_source_text(self, text: str) -> None:
        self.source_text = text
        self.store.save(text)

    def set_program_input(self, text: str) -> None:
        self.program_input = text

    def set_font_size(self, value: float) -> None:
        if math.isnan(value):
            logger.debug("Ignoring NaN font size, keeping %s", self.font_size)
            return
        clamped = min(max(value, self.font_size_min), self.font_size_max)
        self.font_size = int(round(clamped))
