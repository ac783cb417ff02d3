"""Core infrastructure: settings, logging, the user store and error handlers."""
