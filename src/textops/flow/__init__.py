"""
Control what happens when a recoverable problem is encountered.
"""

from .emit import Action, Emit
