"""commentdeck - a Reflex dashboard for browsing, searching and sorting comments.

The `commentdeck.comments` package holds the framework-free core (search, sort, pagination and the
persisted filter state); `commentdeck.ui` renders it with Reflex.
"""

__version__ = "0.1.0"
