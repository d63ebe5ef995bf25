"""
SlideREPL

Go presentation slides served in a browser editor that builds and runs the
code on each slide.
"""

__version__ = "1.0.0"
__author__ = "SlideREPL Team"
