"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "CramQt - Cram MCQs in Style"
UPLOAD_HEADING: str = "Cram MCQs in Style"
UPLOAD_REQUIREMENTS: str = "File must contain an array of question objects with:"

TOOLBAR_OPEN: str = "Open Quiz"
TOOLBAR_RESTART: str = "Restart Quiz"
TOOLBAR_SHUFFLE: str = "Shuffle"
TOOLBAR_SOUND_TEMPLATE: str = "Sound: {state}"
TOOLBAR_SETTINGS: str = "Settings"
TOOLBAR_HELP: str = "Help"
TOOLBAR_ABOUT: str = "About"

IMPORT_BUTTON_TEXT: str = "Select quiz file"
IMPORT_DIALOG_TITLE: str = "Select quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.json);;All files (*.*)"

NEXT_QUESTION_BUTTON: str = "Next Question"
FINISH_QUIZ_BUTTON: str = "Finish Quiz"
SUMMARY_HEADING: str = "Quiz Completed!"
SUMMARY_CORRECT_TEMPLATE: str = "Correct Answers: {count}"
SUMMARY_INCORRECT_TEMPLATE: str = "Incorrect Answers: {count}"
SUMMARY_RESTART_BUTTON: str = "Restart Quiz"

SCORE_CORRECT_TEMPLATE: str = "✓ {count}"
SCORE_INCORRECT_TEMPLATE: str = "✗ {count}"
SCORE_TOTAL_TEMPLATE: str = "Total: {count}"
SCORE_LEFT_TEMPLATE: str = "Left: {count}"

NO_QUIZ_LOADED_MESSAGE: str = "Please open a quiz file first."
IMPORT_FAILED_TITLE: str = "Invalid quiz file"

DEFAULT_UI_FONT_SIZE: int = 10
DEFAULT_QUESTION_FONT_SIZE: int = 14
