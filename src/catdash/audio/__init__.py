"""
CATDASH Audio System.

Synthesized beeps for jumps, score milestones and crashes.
"""

from .cues import AudioCues, CueKind, ToneOutput
from .engine import AudioEngine, get_audio_engine

__all__ = ["AudioCues", "AudioEngine", "CueKind", "ToneOutput", "get_audio_engine"]
