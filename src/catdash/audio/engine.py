"""
CATDASH Audio Engine - synthesized sound effects on pygame.mixer.

Tones are rendered on first use and cached as pygame Sounds. Playback
picks a free mixer channel and returns immediately, so overlapping
cues ring together.
"""

import logging
from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from catdash.audio.synth import WaveType, generate_tone
from catdash.settings import AudioSettings

logger = logging.getLogger(__name__)

ToneKey = Tuple[float, WaveType, float]


class AudioEngine:
    """pygame.mixer backed tone output."""

    def __init__(self, settings: Optional[AudioSettings] = None):
        self.settings = settings or AudioSettings()
        self._initialized = False
        self._suspended = False
        self._muted = not self.settings.enabled
        self._sounds: Dict[ToneKey, pygame.mixer.Sound] = {}
        self._mixer_channels = 2

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def suspended(self) -> bool:
        return self._suspended

    def init(self) -> bool:
        """Initialize the mixer. Returns False if no audio device is usable."""
        if self._initialized:
            return True
        try:
            pygame.mixer.pre_init(self.settings.sample_rate, -16, 2, 512)
            pygame.mixer.init()
            pygame.mixer.set_num_channels(self.settings.channels)

            mixer = pygame.mixer.get_init()
            if mixer:
                self._mixer_channels = mixer[2]
            self._initialized = True
            logger.info("Audio engine initialized")
            return True
        except Exception as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False

    def resume(self) -> None:
        """Initialize lazily and unpause a suspended mixer. Muted engines stay closed."""
        if self._muted:
            return
        if not self._initialized and not self.init():
            return
        if self._suspended:
            pygame.mixer.unpause()
            self._suspended = False
            logger.info("Audio resumed")

    def suspend(self) -> None:
        if self._initialized and not self._suspended:
            pygame.mixer.pause()
            self._suspended = True
            logger.info("Audio suspended")

    def _create_sound(self, samples: np.ndarray) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples, duplicated across channels."""
        if self._mixer_channels > 1:
            samples = np.repeat(samples[:, np.newaxis], self._mixer_channels, axis=1)
        return pygame.sndarray.make_sound(np.ascontiguousarray(samples))

    def _get_sound(self, frequency: float, wave: WaveType, duration: float) -> pygame.mixer.Sound:
        key = (frequency, wave, duration)
        sound = self._sounds.get(key)
        if sound is None:
            samples = generate_tone(
                frequency,
                wave,
                duration,
                sample_rate=self.settings.sample_rate,
                volume=self.settings.volume,
            )
            sound = self._create_sound(samples)
            self._sounds[key] = sound
            logger.debug(f"Generated tone {frequency:.0f}Hz {wave.value} {duration}s")
        return sound

    def play_tone(self, frequency: float, wave: WaveType, duration: float) -> Optional[pygame.mixer.Channel]:
        """Play a tone on a free channel without waiting for it."""
        if not self._initialized or self._suspended or self._muted:
            return None
        try:
            return self._get_sound(frequency, wave, duration).play()
        except Exception as e:
            logger.warning(f"Failed to play tone: {e}")
            return None

    def is_muted(self) -> bool:
        """Check if audio is muted."""
        return self._muted

    def mute(self) -> None:
        if not self._muted:
            self._muted = True
            logger.info("Audio muted")

    def unmute(self) -> None:
        if self._muted:
            self._muted = False
            logger.info("Audio unmuted")

    def cleanup(self) -> None:
        """Cleanup audio resources."""
        if self._initialized:
            self._sounds.clear()
            pygame.mixer.quit()
            self._initialized = False
            logger.info("Audio engine cleaned up")


# Global audio engine instance
_audio_engine: Optional[AudioEngine] = None


def get_audio_engine(settings: Optional[AudioSettings] = None) -> AudioEngine:
    """Get the global audio engine instance."""
    global _audio_engine
    if _audio_engine is None:
        _audio_engine = AudioEngine(settings)
    return _audio_engine
