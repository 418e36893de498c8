# logger.py

# This will hold a reference to the run's Stopwatch instance.
_stopwatch = None

def set_stopwatch(sw):
    """Sets the global stopwatch for the logger to stamp messages with."""
    global _stopwatch
    _stopwatch = sw

def log(message):
    """Prints a message with an elapsed-time stamp if available."""
    # Check if the stopwatch has been set and started.
    if _stopwatch and _stopwatch.start_time is not None:
        elapsed = _stopwatch.elapsed_seconds
        minutes = int(elapsed // 60)
        seconds = elapsed % 60

        # Format the timestamp string.
        time_str = f"[{minutes:02d}:{seconds:06.3f}]"
        print(f"{time_str} {message}")
    else:
        # For messages logged before the run starts.
        print(f"[Start] {message}")
