"""Git integration."""

from .tagger import GitTagger

__all__ = ["GitTagger"]
