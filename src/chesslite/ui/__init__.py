"""Desktop front-end built on PyQt6."""
