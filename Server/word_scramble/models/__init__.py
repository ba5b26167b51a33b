"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .round import Round, RoundPhase, RoundState, SubmissionResult, SubmissionStatus

__all__ = ['Round', 'RoundPhase', 'RoundState', 'SubmissionResult', 'SubmissionStatus']
