"""splitctl - send split commands to a running terminal instance."""

from .commands import run_new_split, run_send_to_split
from .delivery import DeliveryClient, Transport

__version__ = "0.1.0"

__all__ = ["DeliveryClient", "Transport", "run_new_split", "run_send_to_split"]
