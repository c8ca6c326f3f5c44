"""CLI layer — console output, exit codes, and the example program.

This package is the outermost layer.  It may import from ``core``, but
``core`` never imports from ``cli``.
"""
