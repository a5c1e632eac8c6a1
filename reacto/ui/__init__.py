"""Terminal front end: configuration prompts and the live session display."""
