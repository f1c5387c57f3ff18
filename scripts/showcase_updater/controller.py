#------------------------------------------------------------
#                        controller.py
#          Coordinates fetching, rendering, README
#              splicing, and the optional commit.

from typing import Optional
from .config import (
    ACTION_FAILED_TEMPLATE,
    CHANGES_COMMITTED_MESSAGE,
    CONFIGURATION_MESSAGE_TEMPLATE,
    CONTENT_GENERATED_MESSAGE,
    DONE_MESSAGE,
    NO_REMOTE_REPOSITORY_MESSAGE,
    NO_REPOSITORIES_WARNING_TEMPLATE,
    OUTPUT_REPOSITORIES_COUNT,
    OUTPUT_UPDATED_CONTENT,
    START_MESSAGE,
)
from .services.action_service import ActionInputReader, ActionReporter, read_action_inputs
from .services.github_service import GitHubService
from .services.readme_service import load_readme, replace_section, save_readme
from .views.markdown_view import render_showcase

# This function does execute the full update workflow end-to-end.
# Any failure is reported once as "Action failed" and the run returns False.
def run_update(
    reader: Optional[ActionInputReader] = None,
    reporter: Optional[ActionReporter] = None,
    github_service: Optional[GitHubService] = None,
) -> bool:
    reader = reader or ActionInputReader()
    reporter = reporter or ActionReporter()

    try:
        inputs = read_action_inputs(reader, reporter)

        reporter.info(START_MESSAGE)
        reporter.info(
            CONFIGURATION_MESSAGE_TEMPLATE.format(
                username=inputs.username,
                topic=inputs.topic,
                format=inputs.format.value,
                readme_path=inputs.readme_path,
                max_repos=inputs.max_repos,
                commit_changes=inputs.commit_changes,
            )
        )

        github_service = github_service or GitHubService(inputs.token, reporter)
        repositories = github_service.fetch_repositories_with_topic(inputs.username, inputs.topic)
        if not repositories:
            reporter.warning(NO_REPOSITORIES_WARNING_TEMPLATE.format(topic=inputs.topic))

        showcase_content = render_showcase(repositories, inputs.generator_options())
        reporter.info(CONTENT_GENERATED_MESSAGE)

        readme = load_readme(inputs.readme_path, reporter)
        readme = replace_section(readme, inputs.start_marker, inputs.end_marker, showcase_content, reporter)
        save_readme(inputs.readme_path, readme, reporter)

        if inputs.commit_changes:
            remote = reader.remote_repository()
            if remote is None:
                reporter.info(NO_REMOTE_REPOSITORY_MESSAGE)
            else:
                owner, repo = remote
                github_service.commit_file(owner, repo, inputs.readme_path, readme, inputs.commit_message)
                reporter.info(CHANGES_COMMITTED_MESSAGE)

        reporter.set_output(OUTPUT_REPOSITORIES_COUNT, len(repositories))
        reporter.set_output(OUTPUT_UPDATED_CONTENT, showcase_content)
        reporter.info(DONE_MESSAGE)
    except Exception as exc:
        reporter.set_failed(ACTION_FAILED_TEMPLATE.format(cause=exc))
        return False

    return True

# This function does run the action and map the outcome to an exit code.
def main() -> int:
    return 0 if run_update() else 1
