"""Core infrastructure: settings, logging, security, errors and stores."""
