"""
Textual presentation layer for the video converter.
"""
