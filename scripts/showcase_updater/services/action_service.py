#------------------------------------------------------------
#                      action_service.py
#          Reads action inputs and reports progress,
#            warnings, and outputs to the runner.

import os
import uuid
from typing import Mapping, Optional
from ..config import (
    DEFAULT_ACTION_TITLE,
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_FORMAT,
    DEFAULT_MAX_REPOS,
    DEFAULT_README_PATH,
    DEFAULT_TOPIC,
    ENV_GITHUB_OUTPUT,
    ENV_GITHUB_REPOSITORY,
    ENV_INPUT_PREFIX,
    INPUT_COMMIT_CHANGES,
    INPUT_COMMIT_MESSAGE,
    INPUT_END_MARKER,
    INPUT_FORMAT,
    INPUT_MAX_REPOS,
    INPUT_README_PATH,
    INPUT_SHOW_DESCRIPTION,
    INPUT_SHOW_FORKS,
    INPUT_SHOW_LANGUAGE,
    INPUT_SHOW_STARS,
    INPUT_SHOW_TOPICS,
    INPUT_START_MARKER,
    INPUT_TITLE,
    INPUT_TOKEN,
    INPUT_TOPIC,
    INPUT_USERNAME,
    INVALID_MAX_REPOS_WARNING_TEMPLATE,
    SHOWCASE_END_MARKER,
    SHOWCASE_START_MARKER,
)
from ..models import ActionInputs, DisplayFormat

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")

REQUIRED_INPUT_MESSAGE = "Input required and not supplied: {name}"
INVALID_BOOLEAN_MESSAGE = (
    "Input does not meet the YAML 1.2 core schema: {name}\n"
    "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
)

WARNING_COMMAND_TEMPLATE = "::warning::{message}"
ERROR_COMMAND_TEMPLATE = "::error::{message}"
SET_OUTPUT_COMMAND_TEMPLATE = "::set-output name={name}::{value}"
OUTPUT_FILE_TEMPLATE = "{name}<<{delimiter}\n{value}\n{delimiter}\n"
OUTPUT_DELIMITER_PREFIX = "ghadelimiter_"

# This function does escape text for a workflow command payload.
# The runner decodes percent, carriage return, and newline escapes.
def escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")

class ActionReporter:

    # This function does initialize the reporter with its output sinks.
    # The environment mapping locates the runner's output file.
    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self.failed = False

    def info(self, message: str) -> None:
        print(message)

    def warning(self, message: str) -> None:
        print(WARNING_COMMAND_TEMPLATE.format(message=escape_command_data(message)))

    def error(self, message: str) -> None:
        print(ERROR_COMMAND_TEMPLATE.format(message=escape_command_data(message)))

    # This function does report an error and mark the run as failed.
    # The entry point turns the failed flag into a non-zero exit code.
    def set_failed(self, message: str) -> None:
        self.failed = True
        self.error(message)

    # This function does publish a step output for later workflow steps.
    # It appends to GITHUB_OUTPUT and falls back to the legacy command.
    def set_output(self, name: str, value) -> None:
        text = str(value)
        output_path = self.environ.get(ENV_GITHUB_OUTPUT, "")
        if not output_path:
            print(SET_OUTPUT_COMMAND_TEMPLATE.format(name=name, value=escape_command_data(text)))
            return

        delimiter = f"{OUTPUT_DELIMITER_PREFIX}{uuid.uuid4()}"
        with open(output_path, "a", encoding="utf-8") as file_handle:
            file_handle.write(OUTPUT_FILE_TEMPLATE.format(name=name, delimiter=delimiter, value=text))

class ActionInputReader:

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    # This function does read one action input from the environment.
    # It raises when a required input is empty or missing.
    def get_input(self, name: str, required: bool = False) -> str:
        key = f"{ENV_INPUT_PREFIX}{name.replace(' ', '_').upper()}"
        value = (self.environ.get(key) or "").strip()
        if required and not value:
            raise ValueError(REQUIRED_INPUT_MESSAGE.format(name=name))
        return value

    # This function does read a boolean action input.
    # Empty values take the default; anything outside the YAML core schema raises.
    def get_boolean_input(self, name: str, default: bool) -> bool:
        value = self.get_input(name)
        if not value:
            return default
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        raise TypeError(INVALID_BOOLEAN_MESSAGE.format(name=name))

    # This function does split GITHUB_REPOSITORY into owner and name.
    # It returns None when the variable is missing or malformed.
    def remote_repository(self):
        owner, _, name = (self.environ.get(ENV_GITHUB_REPOSITORY) or "").partition("/")
        if not owner or not name:
            return None
        return owner, name

def _parse_max_repos(value: str, reporter: ActionReporter) -> int:
    if not value:
        return DEFAULT_MAX_REPOS
    try:
        parsed = int(value)
    except ValueError:
        parsed = 0
    if parsed <= 0:
        reporter.warning(INVALID_MAX_REPOS_WARNING_TEMPLATE.format(value=value, default=DEFAULT_MAX_REPOS))
        return DEFAULT_MAX_REPOS
    return parsed

# This function does collect every action input into a typed config.
# It applies defaults for empty inputs and validates required ones.
def read_action_inputs(reader: ActionInputReader, reporter: ActionReporter) -> ActionInputs:
    return ActionInputs(
        token=reader.get_input(INPUT_TOKEN, required=True),
        username=reader.get_input(INPUT_USERNAME, required=True),
        topic=reader.get_input(INPUT_TOPIC) or DEFAULT_TOPIC,
        format=DisplayFormat.parse(reader.get_input(INPUT_FORMAT) or DEFAULT_FORMAT),
        readme_path=reader.get_input(INPUT_README_PATH) or DEFAULT_README_PATH,
        title=reader.get_input(INPUT_TITLE) or DEFAULT_ACTION_TITLE,
        max_repos=_parse_max_repos(reader.get_input(INPUT_MAX_REPOS), reporter),
        show_description=reader.get_boolean_input(INPUT_SHOW_DESCRIPTION, True),
        show_language=reader.get_boolean_input(INPUT_SHOW_LANGUAGE, True),
        show_stars=reader.get_boolean_input(INPUT_SHOW_STARS, True),
        show_forks=reader.get_boolean_input(INPUT_SHOW_FORKS, True),
        show_topics=reader.get_boolean_input(INPUT_SHOW_TOPICS, False),
        commit_message=reader.get_input(INPUT_COMMIT_MESSAGE) or DEFAULT_COMMIT_MESSAGE,
        start_marker=reader.get_input(INPUT_START_MARKER) or SHOWCASE_START_MARKER,
        end_marker=reader.get_input(INPUT_END_MARKER) or SHOWCASE_END_MARKER,
        commit_changes=reader.get_boolean_input(INPUT_COMMIT_CHANGES, True),
    )
