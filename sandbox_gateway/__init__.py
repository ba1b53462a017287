"""
Sandbox code gateway.

Forwards code snippets to a Piston-compatible execution backend and classifies
the result into a fixed set of outcomes.
"""

__version__ = "1.0.0"
