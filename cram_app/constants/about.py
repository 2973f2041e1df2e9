"""Static metadata describing CramQt."""

APP_NAME = "CramQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "CramQt is a flashcard-style multiple-choice quiz built with Qt. "
    "Open a JSON file of questions and answer them one at a time; anything you "
    "get wrong comes back at the end of the queue until you get it right."
)

HELP_TEXT = (
    "Open a .json file containing an array of question objects with:\n\n"
    "  question (string)\n"
    "  options (array of 4 strings)\n"
    "  correctOption (number 1-4 or matching option text) OR\n"
    "  correctIndex (number 0-3)\n\n"
    "Question text supports Markdown and LaTeX ($...$). Use Shuffle to reorder "
    "the remaining questions, and Restart to go through the whole deck again."
)

EXAMPLE_QUIZ_JSON = """[
  {
    "question": "What is 2+2?",
    "options": ["3", "4", "5", "6"],
    "correctOption": "4"
  },
  {
    "question": "What is the capital of France?",
    "options": ["London", "Berlin", "Paris", "Madrid"],
    "correctIndex": 2
  }
]"""
