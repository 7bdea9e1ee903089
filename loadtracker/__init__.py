"""Training Load Tracker: session logging and load-management metrics."""
