"""
Audio
=====

Named sound handle over pygame.mixer.Sound.

The mixer itself (device, decoding) belongs to pygame; this wrapper only
remembers the channel a sound last played on so it can be queried,
paused and resumed.
"""

from typing import Optional

import pygame


class Sound:
    """
    A playable sound effect or music track.

    Methods:
        play()      - Play once, overlapping any earlier playback
        play_once() - Play once unless this sound is already playing
        play_bgm()  - Loop forever (background music); no-op if playing
        stop()      - Stop every channel playing this sound
        pause() / resume() - Pause or resume the last channel used
    """

    def __init__(self, sound: pygame.mixer.Sound, name: str = ''):
        self.name = name
        self._sound = sound
        self._channel: Optional[pygame.mixer.Channel] = None
        self._paused = False

    def is_playing(self) -> bool:
        """True if the last channel used is still busy with this sound."""
        if self._channel is None:
            return False
        return self._channel.get_busy() and self._channel.get_sound() is self._sound

    def play(self) -> None:
        self._channel = self._sound.play()
        self._paused = False

    def play_once(self) -> None:
        if self.is_playing():
            return
        self.play()

    def play_bgm(self) -> None:
        if self.is_playing():
            return
        self._channel = self._sound.play(loops=-1)
        self._paused = False

    def stop(self) -> None:
        self._sound.stop()
        self._channel = None
        self._paused = False

    def pause(self) -> None:
        if self.is_playing():
            self._channel.pause()
            self._paused = True

    def resume(self) -> None:
        if self._paused and self._channel is not None:
            self._channel.unpause()
        self._paused = False

    def set_volume(self, volume: float) -> None:
        self._sound.set_volume(volume)
