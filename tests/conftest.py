"""Test configuration and fixtures for the library catalog."""

from tests.fixtures import *  # noqa: F401,F403
