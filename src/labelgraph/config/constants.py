DEFAULTS = {
    # Slots allocated for the visited table of a new cursor
    "VISITED_INITIAL_CAPACITY": 16,
    # Multiplier applied when the visited table has to grow
    "VISITED_GROWTH_FACTOR": 2.0,
    # Level used by configure_logging()
    "LOG_LEVEL": "WARNING",
}
