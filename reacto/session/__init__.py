"""Session scheduler: countdown clock, randomized cues, shared teardown."""

from reacto.session.core import TrainingSession as TrainingSession
from reacto.session.countdown import format_remaining as format_remaining
from reacto.session.params import SessionParameters as SessionParameters
from reacto.session.state import SessionView as SessionView

__all__ = ["SessionParameters", "SessionView", "TrainingSession", "format_remaining"]
