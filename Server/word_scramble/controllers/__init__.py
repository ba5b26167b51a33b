"""
Controllers Package

Contains the HTTP blueprints.
"""

from .round_controller import round_bp

__all__ = ['round_bp']
