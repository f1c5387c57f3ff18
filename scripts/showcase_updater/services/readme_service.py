#------------------------------------------------------------
#                      readme_service.py
#             Provides helpers to read, write, and
#               replace the README showcase block.

import os
from typing import Optional
from ..config import DEFAULT_README_TEMPLATE
from .action_service import ActionReporter

MISSING_MARKER_WARNING = "Markers not found in README. Appending content to the end."
MISSING_README_WARNING_TEMPLATE = "README file not found: {path}. Creating a new one."
READ_MESSAGE_TEMPLATE = "Successfully read README file: {path}"
WRITE_MESSAGE_TEMPLATE = "Successfully wrote README file: {path}"
WRITE_FAILED_TEMPLATE = "Failed to write README file: {error}"
DIRECTORY_EXISTS_MESSAGE = "Directory exists!"
APPEND_SEPARATOR = "\n\n"

# This function does replace the marker-delimited README block.
# Only the first occurrence of each marker is considered; a missing
# marker appends a fresh block to the end of the document instead.
def replace_section(
    content: str,
    start_marker: str,
    end_marker: str,
    new_body: str,
    reporter: Optional[ActionReporter] = None,
) -> str:
    start_index = content.find(start_marker)
    end_index = content.find(end_marker)

    if start_index < 0 or end_index < 0:
        (reporter or ActionReporter()).warning(MISSING_MARKER_WARNING)
        return f"{content}{APPEND_SEPARATOR}{start_marker}\n{new_body}{end_marker}\n"

    before = content[:start_index + len(start_marker)]
    after = content[end_index:]
    return f"{before}\n{new_body}{after}"

# This function does return the README used when none exists yet.
def default_readme() -> str:
    return DEFAULT_README_TEMPLATE

# This function does load README text from the given path.
# A missing file yields the default README; other errors propagate.
def load_readme(path: str, reporter: Optional[ActionReporter] = None) -> str:
    reporter = reporter or ActionReporter()
    try:
        with open(path, "r", encoding="utf-8") as file_handle:
            content = file_handle.read()
    except FileNotFoundError:
        reporter.warning(MISSING_README_WARNING_TEMPLATE.format(path=path))
        return default_readme()

    reporter.info(READ_MESSAGE_TEMPLATE.format(path=path))
    return content

# This function does create a directory tree if it is missing.
# Failures are logged and ignored.
def ensure_directory_exists(path: str, reporter: Optional[ActionReporter] = None) -> None:
    if not path:
        return
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        (reporter or ActionReporter()).info(DIRECTORY_EXISTS_MESSAGE)

# This function does save README text to the given path.
# It writes UTF-8 content and reports write failures before re-raising.
def save_readme(path: str, content: str, reporter: Optional[ActionReporter] = None) -> None:
    reporter = reporter or ActionReporter()
    ensure_directory_exists(os.path.dirname(path), reporter)
    try:
        with open(path, "w", encoding="utf-8") as file_handle:
            file_handle.write(content)
    except OSError as exc:
        reporter.error(WRITE_FAILED_TEMPLATE.format(error=exc))
        raise

    reporter.info(WRITE_MESSAGE_TEMPLATE.format(path=path))
