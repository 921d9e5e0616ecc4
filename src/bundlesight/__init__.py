"""
bundlesight - inspect build stats reports.

Explains why an emitted asset is the size it is and which module pulled a
costly dependency into the bundle.
"""

__version__ = "0.1.0"
