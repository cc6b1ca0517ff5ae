"""
Filesystem access for the power agent.

The configuration loader never touches the disk directly; it goes through
a FileSystem handle so agents can be rooted anywhere (or tested in isolation).
"""

from .filesystem import FileSystem, LocalFileSystem

__all__ = ['FileSystem', 'LocalFileSystem']
