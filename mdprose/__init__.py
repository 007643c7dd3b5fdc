"""mdprose: markdown content classification for readability checks."""
