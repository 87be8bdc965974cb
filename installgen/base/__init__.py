"""Base classes for installgen commands"""

from .base_command import BaseCommand

__all__ = ["BaseCommand"]
