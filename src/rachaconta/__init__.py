"""Fair bill splitting: who pays whom after shared expenses."""

__version__ = "0.1.0"
