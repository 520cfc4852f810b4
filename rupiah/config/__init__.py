"""Runtime configuration: settings, logging and metrics."""
