"""
Video Converter
===============
Terminal front end for converting video files between containers with FFmpeg.
"""

__version__ = "0.1.0"
