"""Sharing tabulated functions between threads."""
from tabulated.threading.synchronized import SynchronizedTabulatedFunction

__all__ = ["SynchronizedTabulatedFunction"]
