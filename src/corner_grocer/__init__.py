"""
corner-grocer: Purchase frequency explorer.

Reads a day's purchase log, counts how often each item was bought, writes a
sorted frequency backup, and lets staff query counts interactively.
"""

__version__ = "0.1.0"
