"""
Posture - Repository Security Posture Core

Cross-provider code search and probe evaluation over collected repository facts.
"""

__version__ = "0.1.0"
