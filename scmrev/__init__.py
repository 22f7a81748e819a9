"""Generate a C header describing the git revision of a checkout."""

__version__ = '1.0.0'
