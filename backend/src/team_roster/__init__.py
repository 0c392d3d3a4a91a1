"""Team roster management backend with fair player auto-selection."""
