"""Debug logging utilities."""

import os
import sys
import time

DEBUG_ENV_VAR = "STATUSLINE_VALUES_DEBUG"


def get_log_file() -> str:
    """Get the debug log file path."""
    logs_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "logs")
    return os.path.join(logs_dir, "statusline_values_debug.log")


def debug_log(message: str) -> None:
    """Log debug messages to the debug log file if debug mode is enabled.

    Args:
        message: Debug message to log
    """
    if not os.getenv(DEBUG_ENV_VAR):
        return

    log_file = get_log_file()
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
    log_message = f"[{timestamp}] {message}\n"

    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(f"DEBUG (couldn't write to {log_file}): {message}", file=sys.stderr)
