"""Chat agent answering developer questions from a Stack Overflow for Teams graph."""

__version__ = "0.1.0"
