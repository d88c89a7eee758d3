"""Random trial harness for the solver."""

from .trials import RandomGridFactory, TrialRunner, TrialResult

__all__ = ["RandomGridFactory", "TrialRunner", "TrialResult"]
