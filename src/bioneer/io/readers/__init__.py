"""File readers registered with :mod:`bioneer.io`."""
