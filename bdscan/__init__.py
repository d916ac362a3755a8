"""bdscan - Black Duck Detect scan wrapper for npm, maven, ios and android projects."""

__version__ = "1.0.0"
