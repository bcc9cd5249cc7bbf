"""
Configuration module.
"""

from .loader import ConfigLoader, MountConfig

__all__ = ["ConfigLoader", "MountConfig"]
