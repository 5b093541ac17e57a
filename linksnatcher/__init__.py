"""
LinkSnatcher: resolve social-media video links into downloadable files.
"""

__version__ = "1.0.0"
