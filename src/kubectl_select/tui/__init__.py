"""Terminal User Interface components built with Textual."""
