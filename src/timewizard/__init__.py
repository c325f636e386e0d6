"""timewizard — annotate HTML <time> elements with normalized instants."""

__version__ = "0.3.0"
