"""csvchat - ask questions about a CSV file and get rendered answers.

Answers are markdown documents with embedded chart blocks, rendered in the
terminal with rich and Textual.
"""

__version__ = "0.1.0"
