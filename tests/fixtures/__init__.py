"""Shared pytest fixtures and helpers."""

from .core import *  # noqa: F401,F403
from .api import *  # noqa: F401,F403
