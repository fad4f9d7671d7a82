"""Runnable examples of decorator, composite, factory, iterator, mediator and memento patterns."""

__version__ = "0.1.0"