"""Place emergency supplies so every city in a road network is covered.

Also reads network map files, and has small colour, font, console and
shift helpers.
"""

__version__ = "0.1.0"