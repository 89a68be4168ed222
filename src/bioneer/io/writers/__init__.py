"""File writers registered with :mod:`bioneer.io`."""
