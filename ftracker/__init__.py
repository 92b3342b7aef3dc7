"""
Training tracker package.

This package provides formulas for calculating distance, mean speed
and calories burned for running, walking and swimming workouts, and
renders a short text summary of a training session.
"""

__version__ = "0.1.0"
