"""sysmod - discover system modules and toggle their running and auto-start state."""
