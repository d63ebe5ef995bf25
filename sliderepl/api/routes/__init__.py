"""Route modules for SlideREPL."""
