"""Quiz-related constants shared across UI and core layers."""

OPTION_COUNT: int = 4
OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")
DEFAULT_QUIZ_FILENAME: str = "quiz_questions.json"
CORRECT_SOUND_PATH: str | None = "cram_app/data/sounds/correct.wav"
CORRECT_SOUND_VOLUME: float = 0.6
