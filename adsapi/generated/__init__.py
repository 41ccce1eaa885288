"""Pre-generated service wrappers written by ``adsapi generate``."""
