"""Media player front-end logic: tables, seek bar, shortcuts, MPRIS and media keys."""

__version__ = "0.1.0"