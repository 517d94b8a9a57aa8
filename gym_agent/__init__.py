"""
Wellness Nepal gym equipment assistant

A reasoning/acting chat agent over a static product catalog, served over SSE.
"""

__version__ = "1.0.0"
