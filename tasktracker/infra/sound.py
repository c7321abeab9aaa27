"""
Notification sinks: audible feedback for task events.

Architecture Decision: Fire-and-forget
Stores call notify() and never look at the outcome. A sink that cannot play
anything must stay silent rather than fail the mutation that triggered it.
"""

import logging
import math
import struct
import wave
from pathlib import Path
from typing import Dict, NamedTuple

from tasktracker.domain.models import NotificationKind
from tasktracker.infra.config import Settings

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
FADE_FLOOR = 0.01


class Tone(NamedTuple):
    frequency: float  # Hz
    gain: float       # peak amplitude, 0..1
    duration: float   # seconds


TONES: Dict[NotificationKind, Tone] = {
    NotificationKind.ADD: Tone(800, 0.3, 0.1),
    NotificationKind.COMPLETE: Tone(1000, 0.2, 0.15),
    NotificationKind.DELETE: Tone(400, 0.3, 0.1),
}


class NotificationSink:
    """Receives discrete event signals from the stores"""

    def notify(self, kind: NotificationKind) -> None:
        raise NotImplementedError("Subclasses must implement notify")


class NullNotificationSink(NotificationSink):
    """Drops every signal (sound disabled)"""

    def notify(self, kind: NotificationKind) -> None:
        pass


def render_tone(tone: Tone, path: Path, sample_rate: int = SAMPLE_RATE) -> Path:
    """
    Write a sine tone with an exponential fade to a 16-bit mono WAV file.

    The amplitude decays from tone.gain to FADE_FLOOR over the tone's duration.

    Args:
        tone: Frequency, peak gain and duration
        path: Target file
        sample_rate: Samples per second

    Returns:
        The written path
    """
    n_samples = int(sample_rate * tone.duration)
    ratio = FADE_FLOOR / tone.gain
    samples = []
    for i in range(n_samples):
        t = i / sample_rate
        envelope = tone.gain * ratio ** (t / tone.duration)
        value = envelope * math.sin(2 * math.pi * tone.frequency * t)
        samples.append(int(value * 32767))

    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), 'wb') as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(struct.pack(f"<{n_samples}h", *samples))
    return path


class QtSoundSink(NotificationSink):
    """
    Plays one short tone per event kind through QtMultimedia.

    Tones are rendered to the cache directory on first use. QSoundEffect
    plays asynchronously, so this sink needs a running Qt event loop to be
    audible; without QtMultimedia it logs once and stays silent.
    """

    def __init__(self, cache_dir: Path, volume: float = 1.0):
        self.cache_dir = Path(cache_dir)
        self.volume = volume
        self._effects = {}

        try:
            from PySide6.QtCore import QUrl
            from PySide6.QtMultimedia import QSoundEffect
        except Exception as e:
            logger.warning("Sound disabled, QtMultimedia unavailable: %s", e)
            return

        for kind, tone in TONES.items():
            path = self.cache_dir / f"tone_{kind.value}.wav"
            if not path.exists():
                render_tone(tone, path)
            effect = QSoundEffect()
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(volume)
            self._effects[kind] = effect

    @property
    def available(self) -> bool:
        return bool(self._effects)

    def notify(self, kind: NotificationKind) -> None:
        effect = self._effects.get(kind)
        if effect is not None:
            effect.play()


def build_sink(settings: Settings) -> NotificationSink:
    """
    Create the sink selected by the user preferences.

    Returns:
        NotificationSink instance
    """
    prefs = settings.preferences
    if not prefs.sound_enabled:
        return NullNotificationSink()
    return QtSoundSink(settings.cache_dir, volume=prefs.sound_volume)
