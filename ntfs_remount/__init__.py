"""
ntfs-remount: re-mount NTFS drives in read/write mode on macOS with NTFS-3G.
"""

__version__ = "1.0.0"
