"""AI subsystem of the writing-coach platform."""
