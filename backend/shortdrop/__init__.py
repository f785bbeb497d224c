"""
ShortDrop

Minimal file sharing backed by object storage: upload a file, get a short
redirect link, delete it later.
"""

__version__ = "1.0.0"
