"""TopCut: Swiss rounds into a top 8 single-elimination cut."""

__version__ = "0.1.0"
