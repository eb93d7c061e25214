import os
import sys
import json
import time
import logging

from .exceptions import InputNotFoundError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_dir="logs", level="INFO"):
    """Send detailed logs to a per-run file and keep the console for critical messages"""
    os.makedirs(log_dir, exist_ok=True)
    log_file_path = os.path.join(log_dir, f"owner_mapper_{int(time.time())}.log")

    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.CRITICAL)  # Only show critical messages

    logging.basicConfig(level=level, handlers=[file_handler, console_handler], force=True)
    return log_file_path


def print_status(message):
    """Print status messages to terminal only"""
    print(f"STATUS: {message}")
    logger.info(f"STATUS: {message}")  # Also log to file


def print_completed(task_name, success=True):
    """Print completion status"""
    status = "✅ COMPLETED" if success else "❌ FAILED"
    print(f"{status}: {task_name}")
    logger.info(f"COMPLETED: {task_name} - Success: {success}")


def is_empty_value(value):
    """Check if a value is empty, None, or whitespace"""
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    return False


def ensure_directory(path):
    """Create directory if it doesn't exist"""
    os.makedirs(path, exist_ok=True)


def get_property_id(filename):
    """Property id taken from the file name without extension"""
    base = os.path.basename(filename)
    return os.path.splitext(base)[0]


def find_default_input(directory="."):
    """Locate input.html / input.json in a directory"""
    from .config import DEFAULT_INPUTS

    for name in DEFAULT_INPUTS:
        path = os.path.join(directory, name)
        if os.path.isfile(path):
            return path
    raise InputNotFoundError(
        f"No input document found in {os.path.abspath(directory)} (looked for {', '.join(DEFAULT_INPUTS)})"
    )


def read_document(filepath, input_format=None):
    """Read an HTML or JSON snapshot; JSON documents are returned parsed"""
    if not os.path.isfile(filepath):
        raise InputNotFoundError(f"Input file not found: {filepath}")

    if input_format is None:
        input_format = "json" if filepath.lower().endswith(".json") else "html"

    try:
        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            content = f.read()
    except OSError as e:
        raise InputNotFoundError(f"Could not read {filepath}: {e}") from e

    if input_format == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise InputNotFoundError(f"Invalid JSON in {filepath}: {e}") from e
    return content


def write_json(path, data):
    directory = os.path.dirname(path)
    if directory:
        ensure_directory(directory)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info(f"Wrote {path}")
