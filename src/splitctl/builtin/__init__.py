"""Transports shipped with splitctl."""
