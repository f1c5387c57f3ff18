#------------------------------------------------------------
#                          config.py
#     Centralizes action inputs, defaults, markers, and
#              GitHub API constants for the updater.

# Input names as declared in action.yml
INPUT_TOKEN = "token"
INPUT_USERNAME = "username"
INPUT_TOPIC = "topic"
INPUT_FORMAT = "format"
INPUT_README_PATH = "readme_path"
INPUT_TITLE = "title"
INPUT_MAX_REPOS = "max_repos"
INPUT_SHOW_DESCRIPTION = "show_description"
INPUT_SHOW_LANGUAGE = "show_language"
INPUT_SHOW_STARS = "show_stars"
INPUT_SHOW_FORKS = "show_forks"
INPUT_SHOW_TOPICS = "show_topics"
INPUT_COMMIT_MESSAGE = "commit_message"
INPUT_START_MARKER = "start_marker"
INPUT_END_MARKER = "end_marker"
INPUT_COMMIT_CHANGES = "commit_changes"

# Output names as declared in action.yml
OUTPUT_REPOSITORIES_COUNT = "repositories_count"
OUTPUT_UPDATED_CONTENT = "updated_content"

# Environment variables provided by the Actions runner.
ENV_INPUT_PREFIX = "INPUT_"
ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"
ENV_GITHUB_REPOSITORY = "GITHUB_REPOSITORY"

# Default values for action inputs
DEFAULT_TOPIC = "showcase"
DEFAULT_FORMAT = "card"
DEFAULT_README_PATH = "README.md"
DEFAULT_ACTION_TITLE = "🚀 Showcase Projects"
DEFAULT_MAX_REPOS = 10
DEFAULT_COMMIT_MESSAGE = "Update showcase projects"
DEFAULT_COMMIT_BRANCH = "main"

# Default values for the renderer when called without action inputs.
DEFAULT_RENDER_TITLE = "🚀 My Projects"

# Markers used in README.md to identify the showcase section.
SHOWCASE_START_MARKER = "<!-- SHOWCASE-START -->"
SHOWCASE_END_MARKER = "<!-- SHOWCASE-END -->"

# Constants for GitHub API interaction
GITHUB_API_ACCEPT_HEADER = "application/vnd.github+json"
GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_REPOS_PER_PAGE = 100
GITHUB_REPOS_TYPE = "owner"
GITHUB_REPOS_SORT = "updated"
GITHUB_REQUEST_TIMEOUT_SECONDS = 30

# External image services used by the rendered formats.
SHIELDS_BADGE_BASE_URL = "https://img.shields.io/badge"
README_STATS_PIN_URL = "https://github-readme-stats.vercel.app/api/pin/"

# Rendering limits
DESCRIPTION_MAX_LENGTH = 150
DESCRIPTION_ELLIPSIS = "..."
TABLE_MAX_TOPICS = 3

# README written when the target file does not exist yet.
DEFAULT_README_TEMPLATE = (
    "# Welcome to my GitHub Profile! 👋\n"
    "\n"
    f"{SHOWCASE_START_MARKER}\n"
    f"{SHOWCASE_END_MARKER}\n"
    "\n"
    "Thanks for visiting my profile!\n"
)

# Messages and templates for logging.
START_MESSAGE = "🚀 Starting Showcase Projects Action"
DONE_MESSAGE = "✅ Showcase Projects Action completed successfully"
CONFIGURATION_MESSAGE_TEMPLATE = (
    "Configuration:\n"
    "  - Username: {username}\n"
    "  - Topic: {topic}\n"
    "  - Format: {format}\n"
    "  - README Path: {readme_path}\n"
    "  - Max Repos: {max_repos}\n"
    "  - Commit Changes: {commit_changes}"
)
NO_REPOSITORIES_WARNING_TEMPLATE = "No repositories found with topic: {topic}"
CONTENT_GENERATED_MESSAGE = "Generated showcase content successfully"
CHANGES_COMMITTED_MESSAGE = "Changes committed and pushed successfully"
NO_REMOTE_REPOSITORY_MESSAGE = "GITHUB_REPOSITORY is not set; skipping commit"
INVALID_MAX_REPOS_WARNING_TEMPLATE = "Invalid max_repos value {value!r}; using {default}"
ACTION_FAILED_TEMPLATE = "Action failed: {cause}"
