"""
Application слой: сборка пайплайна из компонентов.
"""

from .factory import create_pipeline, create_registry

__all__ = [
    "create_pipeline",
    "create_registry",
]
