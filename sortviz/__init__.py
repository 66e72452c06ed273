"""Step-by-step visualization of classic sorting algorithms with pygame and a console menu."""

__version__ = "0.1.0"