"""Sugoroku - a text-mode board game driven by die rolls."""

__version__ = "0.1.0"
