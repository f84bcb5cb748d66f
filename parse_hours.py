#!/usr/bin/env python3
"""
Convenience entry point for running hoursparser directly.

Usage: python parse_hours.py [command] [options]
"""

from hoursparser.cli.app import app

if __name__ == "__main__":
    app()
