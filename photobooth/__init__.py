"""
Photobooth API.

Users open photo sessions and attach photos to them, either by URL or by
uploading raw image bytes.
"""

__version__ = "0.1.0"
