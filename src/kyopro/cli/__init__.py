"""Command-line interface for kyopro (the ``kp`` command)."""
