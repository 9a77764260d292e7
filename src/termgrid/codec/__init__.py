"""Codecs for the grid's terminal output."""

from termgrid.codec.frame_parser import parse_frame

__all__ = ["parse_frame"]
