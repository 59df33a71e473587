"""Manuscript document building."""

from makinilya.manuscript.builder import ManuscriptBuilder, ManuscriptLayout

__all__ = ["ManuscriptBuilder", "ManuscriptLayout"]
