"""Small programs built on the library, run through ``gerr.cli``."""
