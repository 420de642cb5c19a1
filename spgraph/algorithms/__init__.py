"""Path-finding algorithms and their supporting data structures."""
