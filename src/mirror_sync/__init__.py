"""mirror-sync - one-way directory mirroring with a concurrent worker pool."""

__version__ = "0.1.0"
