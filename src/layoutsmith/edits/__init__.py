"""Diff-based editing of layouts."""

from .diff_editor import apply_edits

__all__ = ["apply_edits"]
