"""splitctl verbs."""

from .new_split import NEW_SPLIT, run_new_split
from .pipeline import VerbSpec, run_verb
from .send_to_split import SEND_TO_SPLIT, run_send_to_split

__all__ = ["NEW_SPLIT", "SEND_TO_SPLIT", "VerbSpec", "run_new_split", "run_send_to_split", "run_verb"]
