"""Protocol definitions for extensible components."""

from chunkpack.protocols.classifier import TextClassifier

__all__ = ["TextClassifier"]
