"""Correct-answer chime driven by the engine's answer events."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from cram_app.constants.quiz_constants import CORRECT_SOUND_PATH, CORRECT_SOUND_VOLUME
from cram_app.core.models import AnswerEvaluated

logger = logging.getLogger(__name__)


class AnswerSound(QObject):
    """Plays a short sound after a correct answer.

    Playback is fire-and-forget: a missing file or a decoding error is logged
    and the quiz carries on silently.
    """

    def __init__(self, parent: QObject | None = None, enabled: bool = True) -> None:
        super().__init__(parent)
        self._enabled = enabled
        self._effect: QSoundEffect | None = None
        self._setup_effect()

    def _setup_effect(self) -> None:
        path_setting = CORRECT_SOUND_PATH
        if not path_setting:
            return
        sound_path = Path(path_setting)
        if not sound_path.is_absolute():
            # cram_app/ui/answer_sound.py -> project root is parents[2]
            project_root = Path(__file__).resolve().parents[2]
            sound_path = project_root / sound_path
        if not sound_path.exists():
            logger.warning("Correct-answer sound not found at %s; sound disabled.", sound_path)
            return
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(sound_path)))
        effect.setVolume(CORRECT_SOUND_VOLUME)
        effect.statusChanged.connect(self._handle_status_changed)
        self._effect = effect

    def _handle_status_changed(self) -> None:
        if self._effect is not None and self._effect.status() == QSoundEffect.Status.Error:
            logger.warning("Audio play failed for %s", self._effect.source().toLocalFile())

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        if not enabled and self._effect is not None and self._effect.isPlaying():
            self._effect.stop()

    def handle_answer(self, event: AnswerEvaluated) -> None:
        """Answer listener registered with the quiz engine."""
        if not event.correct or not self._enabled or self._effect is None:
            return
        if self._effect.isPlaying():
            self._effect.stop()
        self._effect.play()
