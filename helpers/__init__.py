"""Pure coalition math - no I/O, easily testable."""
