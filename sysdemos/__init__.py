"""Small demonstrations of systems-programming ideas: rationals, points, logging,
word tables, an allocator, file I/O, memory-mapped files and thread synchronisation."""

__version__ = "0.1.0"