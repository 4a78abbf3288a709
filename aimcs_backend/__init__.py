"""
AIMCS Backend API

Gateway service exposing health, model catalog and chat endpoints for the
AIMCS frontend.
"""

__version__ = "1.0.0"
