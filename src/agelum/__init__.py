"""agelum: document store for agent tooling over a git repository tree."""

__version__ = "0.1.0"
