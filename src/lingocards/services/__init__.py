"""Services for scheduling, selecting and reviewing words."""
