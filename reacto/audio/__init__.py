"""Audio cue playback."""

from reacto.audio.player import BellCueSound as BellCueSound
from reacto.audio.player import CueSound as CueSound
from reacto.audio.player import Mpg123CueSound as Mpg123CueSound
from reacto.audio.player import create_cue_sound as create_cue_sound

__all__ = ["BellCueSound", "CueSound", "Mpg123CueSound", "create_cue_sound"]
