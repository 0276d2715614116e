"""Interpreter module for stackscript."""

from .interpreter import Interpreter

__all__ = ["Interpreter"]
