"""Volumes of the sound classes, kept in an INI settings file."""

from __future__ import annotations

import configparser
import logging
import os
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

log = logging.getLogger(__name__)

AUDIO_CONFIG_SECTION = "/Script/Tetris.AudioManagerSubsystem"
DEFAULT_VOLUME = 1.0

MAIN_SOUND_CLASS = "Main"
BGM_SOUND_CLASS = "Bgm"
SFX_SOUND_CLASS = "Sfx"


class AudioSettings:
    """Per-sound-class volumes, applied through a mixer and saved to a settings file."""

    def __init__(
        self,
        path: Union[str, os.PathLike],
        sound_classes: Iterable[str] = (MAIN_SOUND_CLASS, BGM_SOUND_CLASS, SFX_SOUND_CLASS),
        mixer: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self.path = os.fspath(path)
        self.sound_classes: Tuple[str, ...] = tuple(sound_classes)
        self._mixer = mixer
        self._volumes: Dict[str, float] = {}
        self._config = configparser.ConfigParser()
        self._config.optionxform = str

    def load(self) -> None:
        """Read saved volumes, falling back to the default for classes not yet saved."""
        self._config.read(self.path)
        if not self._config.has_section(AUDIO_CONFIG_SECTION):
            self._config.add_section(AUDIO_CONFIG_SECTION)
        for sound_class in self.sound_classes:
            if self._config.has_option(AUDIO_CONFIG_SECTION, sound_class):
                volume = self._config.getfloat(AUDIO_CONFIG_SECTION, sound_class)
            else:
                volume = DEFAULT_VOLUME
                self._config.set(AUDIO_CONFIG_SECTION, sound_class, str(volume))
            self.set_volume(sound_class, volume)

    def save(self) -> None:
        """Write every known volume to the settings file."""
        if not self._config.has_section(AUDIO_CONFIG_SECTION):
            self._config.add_section(AUDIO_CONFIG_SECTION)
        for sound_class, volume in self._volumes.items():
            self._config.set(AUDIO_CONFIG_SECTION, sound_class, str(volume))
        with open(self.path, "w", encoding="utf-8") as handle:
            self._config.write(handle)

    def set_volume(self, sound_class: str, volume: float) -> None:
        """Set the volume of ``sound_class`` and apply it through the mixer."""
        if not sound_class:
            raise ValueError("a sound class name is required")
        self._volumes[sound_class] = float(volume)
        if self._mixer is not None:
            self._mixer(sound_class, float(volume))

    def get_volume(self, sound_class: str) -> float:
        """Return the volume of ``sound_class``, or the default if it has none."""
        return self._volumes.get(sound_class, DEFAULT_VOLUME)

    @property
    def main_volume(self) -> float:
        """Volume of the main sound class."""
        return self.get_volume(MAIN_SOUND_CLASS)

    @main_volume.setter
    def main_volume(self, volume: float) -> None:
        self.set_volume(MAIN_SOUND_CLASS, volume)

    @property
    def bgm_volume(self) -> float:
        """Volume of the background music."""
        return self.get_volume(BGM_SOUND_CLASS)

    @bgm_volume.setter
    def bgm_volume(self, volume: float) -> None:
        self.set_volume(BGM_SOUND_CLASS, volume)

    @property
    def sfx_volume(self) -> float:
        """Volume of the sound effects."""
        return self.get_volume(SFX_SOUND_CLASS)

    @sfx_volume.setter
    def sfx_volume(self, volume: float) -> None:
        self.set_volume(SFX_SOUND_CLASS, volume)