"""bigletters -- Big Letters web server.

Serves a few static letter pages and a shared 16x16 brightness grid
that browsers (or the bundled client) can read and darken one cell at
a time over a small JSON API.
"""

__version__ = "0.1.0"
