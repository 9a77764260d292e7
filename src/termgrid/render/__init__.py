"""Renderers for grid output: terminal frames, plain text, and images."""

from termgrid.render.terminal import TerminalRenderer
from termgrid.render.text import TextRenderer
from termgrid.render.image import ImageRenderer

__all__ = ["TerminalRenderer", "TextRenderer", "ImageRenderer"]
