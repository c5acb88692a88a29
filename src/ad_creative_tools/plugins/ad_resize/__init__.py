"""Ad resize plugin."""

from .schema import AdResizeOutput, AdResizeParams, RenderedAdFile
from .task import AdResizeTask

__all__ = ["AdResizeTask", "AdResizeParams", "AdResizeOutput", "RenderedAdFile"]
