"""Gameplay sound cues. Fire-and-forget, never allowed to break a frame."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Protocol

from catdash.audio.synth import WaveType

logger = logging.getLogger(__name__)


class CueKind(Enum):
    JUMP = auto()
    SCORE = auto()
    DEATH = auto()


@dataclass(frozen=True)
class Tone:
    frequency: float
    wave: WaveType
    duration: float  # seconds


TONES: Dict[CueKind, Tone] = {
    CueKind.JUMP: Tone(600.0, WaveType.SQUARE, 0.1),     # retro beep
    CueKind.SCORE: Tone(1200.0, WaveType.SINE, 0.1),
    CueKind.DEATH: Tone(150.0, WaveType.SAWTOOTH, 0.4),
}


class ToneOutput(Protocol):
    """Audio device able to play a single synthesized tone."""

    def play_tone(self, frequency: float, wave: WaveType, duration: float) -> None:
        ...

    def resume(self) -> None:
        ...


class AudioCues:
    """
    Maps gameplay events to fixed tones on an output device.

    Every call is best effort: a missing output makes it a no-op and
    output errors are logged and dropped.
    """

    def __init__(self, output: Optional[ToneOutput] = None) -> None:
        self.output = output

    def resume(self) -> None:
        """Wake a suspended output, typically on session start."""
        if self.output is None:
            return
        try:
            self.output.resume()
        except Exception as e:
            logger.debug(f"Audio resume failed: {e}")

    def play(self, kind: CueKind) -> None:
        if self.output is None:
            return
        tone = TONES[kind]
        try:
            self.output.play_tone(tone.frequency, tone.wave, tone.duration)
        except Exception as e:
            logger.debug(f"Cue {kind.name} dropped: {e}")

    def jump(self) -> None:
        self.play(CueKind.JUMP)

    def score(self) -> None:
        self.play(CueKind.SCORE)

    def die(self) -> None:
        self.play(CueKind.DEATH)
