"""ctail: print the last lines of a file or standard input."""

__version__ = "0.1.0"
