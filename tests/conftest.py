"""Test configuration and fixtures for the contact API."""

from tests.fixtures import *  # noqa: F401,F403
