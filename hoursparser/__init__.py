"""
hoursparser - Turn free-text opening hours into a weekly schedule.
"""

__version__ = "0.1.0"
