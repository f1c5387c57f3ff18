#------------------------------------------------------------
#                      markdown_view.py
#          Renders the showcase block as a list, an
#              HTML table, or a grid of pin cards.

from datetime import date
from typing import Callable, Dict, List, Optional, Sequence
from urllib.parse import quote, urlencode
from ..config import (
    DESCRIPTION_ELLIPSIS,
    DESCRIPTION_MAX_LENGTH,
    README_STATS_PIN_URL,
    SHIELDS_BADGE_BASE_URL,
    TABLE_MAX_TOPICS,
)
from ..models import DisplayFormat, GeneratorOptions, Repository

HEADING_TEMPLATE = "## {title}\n\n"
EMPTY_MESSAGE = "No projects found.\n\n"
FOOTER_TEMPLATE = "\n---\n*Updated on {date}*\n\n"
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

LIST_HEADING_TEMPLATE = "- ### 🧑‍💻 **[{name}]({url})**\n"
LIST_BADGES_TEMPLATE = "   {badges}\n"
LIST_DESCRIPTION_TEMPLATE = "   {description}\t"
LIST_HOMEPAGE_TEMPLATE = "   [Visit Website]({homepage})\n"

LANGUAGE_BADGE_TEMPLATE = "![{language}](" + SHIELDS_BADGE_BASE_URL + "/-{encoded}-blue)"
STARS_BADGE_TEMPLATE = "![Stars](" + SHIELDS_BADGE_BASE_URL + "/⭐-{count}-yellow)"
FORKS_BADGE_TEMPLATE = "![Forks](" + SHIELDS_BADGE_BASE_URL + "/🔀-{count}-orange)"

NO_DESCRIPTION_LABEL = "No description"
NO_LANGUAGE_LABEL = "None Detected"
NO_TOPICS_LABEL = "None"
TABLE_REPO_CELL_TEMPLATE = '      <td><a href="{url}" target="_blank"><strong>{name}</strong></a></td>\n'
TABLE_HOMEPAGE_TEMPLATE = '<br><a href="{homepage}" target="_blank"><strong>Live Website</strong></a>'
TABLE_LANGUAGE_BADGE_TEMPLATE = (
    '<img src="' + SHIELDS_BADGE_BASE_URL + '/-{encoded}-blue?style=flat-square" alt="{alt}"/>'
)
TABLE_TOPIC_TEMPLATE = (
    '<span style="background-color: #f1f8ff; color: #0366d6; padding: 2px 6px; '
    'border-radius: 3px; font-size: 12px; margin-right: 4px;">{topic}</span>'
)

CARD_CONTAINER_OPEN = '<div style="display: flex; flex-wrap: wrap; justify-content: left; gap: 4px">\n\n'
CARD_CONTAINER_CLOSE = "\n</div>\n\n"
CARD_TEMPLATE = (
    '<a href="{url}">\n'
    '  <img align="center" src="' + README_STATS_PIN_URL + '?{query}" />\n'
    "</a>\n"
)

# Characters encodeURIComponent leaves untouched.
URI_COMPONENT_SAFE = "-_.!~*'()"

HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

# This function does escape HTML special characters in a text field.
# Ampersands go first so later entities are not double-escaped.
def escape_html(text: str) -> str:
    escaped = text
    for raw, entity in HTML_ESCAPES:
        escaped = escaped.replace(raw, entity)
    return escaped

def encode_uri_component(text: str) -> str:
    return quote(text, safe=URI_COMPONENT_SAFE)

def _flag(value: bool) -> str:
    return "true" if value else "false"

# This function does truncate a description for the table layout.
def truncate_description(description: str) -> str:
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return description[:DESCRIPTION_MAX_LENGTH] + DESCRIPTION_ELLIPSIS
    return description

# This function does format the footer date as e.g. "January 5, 2024".
# Month names are fixed English regardless of the process locale.
def format_updated_date(day: date) -> str:
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"

# This function does build the inline badge row for the list layout.
# Language is skipped when disabled or unknown.
def render_badges(repo: Repository, options: GeneratorOptions) -> str:
    badges = []
    if options.show_language and repo.language:
        badges.append(LANGUAGE_BADGE_TEMPLATE.format(language=repo.language, encoded=encode_uri_component(repo.language)))
    if options.show_stars:
        badges.append(STARS_BADGE_TEMPLATE.format(count=repo.stargazers_count))
    if options.show_forks:
        badges.append(FORKS_BADGE_TEMPLATE.format(count=repo.forks_count))
    return " ".join(badges)

def render_list(repositories: Sequence[Repository], options: GeneratorOptions) -> str:
    parts = []
    for repo in repositories:
        parts.append(LIST_HEADING_TEMPLATE.format(name=repo.name, url=repo.html_url))
        badges = render_badges(repo, options)
        if badges:
            parts.append(LIST_BADGES_TEMPLATE.format(badges=badges))
        parts.append("\n")

        if options.show_description and repo.description:
            parts.append(LIST_DESCRIPTION_TEMPLATE.format(description=repo.description))
        if repo.homepage:
            parts.append(LIST_HOMEPAGE_TEMPLATE.format(homepage=repo.homepage))
        parts.append("\n")

    return "".join(parts) + "\n"

def _render_table_header(options: GeneratorOptions) -> List[str]:
    columns = ["Repository", "Description"]
    if options.show_language:
        columns.append("Language")
    if options.show_stars:
        columns.append("Stars")
    if options.show_forks:
        columns.append("Forks")
    if options.show_topics:
        columns.append("Topics")

    lines = ["  <thead>\n", "    <tr>\n"]
    lines.extend(f"      <th>{column}</th>\n" for column in columns)
    lines.extend(["    </tr>\n", "  </thead>\n"])
    return lines

def _render_table_row(repo: Repository, options: GeneratorOptions) -> List[str]:
    lines = ["    <tr>\n", TABLE_REPO_CELL_TEMPLATE.format(url=repo.html_url, name=repo.name)]

    description = truncate_description(repo.description or NO_DESCRIPTION_LABEL)
    homepage = TABLE_HOMEPAGE_TEMPLATE.format(homepage=repo.homepage) if repo.homepage else ""
    lines.append(f"      <td>{escape_html(description)} {homepage}</td>\n")

    if options.show_language:
        language = repo.language or NO_LANGUAGE_LABEL
        badge = TABLE_LANGUAGE_BADGE_TEMPLATE.format(encoded=encode_uri_component(language), alt=escape_html(language))
        lines.append(f"      <td>{badge}</td>\n")
    if options.show_stars:
        lines.append(f"      <td>⭐ {repo.stargazers_count}</td>\n")
    if options.show_forks:
        lines.append(f"      <td>🔀 {repo.forks_count}</td>\n")
    if options.show_topics:
        topics = "".join(
            TABLE_TOPIC_TEMPLATE.format(topic=escape_html(topic)) for topic in repo.topics[:TABLE_MAX_TOPICS]
        )
        lines.append(f"      <td>{topics or NO_TOPICS_LABEL}</td>\n")

    lines.append("    </tr>\n")
    return lines

# This function does render repositories as an HTML table.
# Optional columns appear only when their display flag is set.
def render_table(repositories: Sequence[Repository], options: GeneratorOptions) -> str:
    lines = ["<table>\n"]
    lines.extend(_render_table_header(options))
    lines.append("  <tbody>\n")
    for repo in repositories:
        lines.extend(_render_table_row(repo, options))
    lines.append("  </tbody>\n</table>\n\n")
    return "".join(lines)

def build_card_query(repo: Repository, options: GeneratorOptions) -> str:
    return urlencode(
        [
            ("username", repo.owner),
            ("repo", repo.name),
            ("theme", "default"),
            ("show_owner", "true"),
            ("description_lines_count", "2" if options.show_description else "0"),
            ("hide", "" if options.show_description else "description"),
            ("hide_language", _flag(not options.show_language)),
            ("show_icons", "true"),
            ("show_stars", _flag(options.show_stars)),
            ("show_forks", _flag(options.show_forks)),
            ("show_topics", _flag(options.show_topics)),
        ]
    )

# This function does render repositories as pinned stats cards.
# A blank line after every second card controls the wrapping.
def render_cards(repositories: Sequence[Repository], options: GeneratorOptions) -> str:
    parts = [CARD_CONTAINER_OPEN]
    last_index = len(repositories) - 1
    for index, repo in enumerate(repositories):
        if index > 0 and index % 2 == 0:
            parts.append("\n")
        parts.append(CARD_TEMPLATE.format(url=repo.html_url, query=build_card_query(repo, options)))
        if index < last_index and index % 2 == 0:
            parts.append("\n")
    parts.append(CARD_CONTAINER_CLOSE)
    return "".join(parts)

RENDERERS: Dict[DisplayFormat, Callable[[Sequence[Repository], GeneratorOptions], str]] = {
    DisplayFormat.LIST: render_list,
    DisplayFormat.TABLE: render_table,
    DisplayFormat.CARD: render_cards,
}

# This function does render the full showcase block.
# It adds the heading, the chosen layout, and the updated-on footer.
def render_showcase(
    repositories: Sequence[Repository],
    options: Optional[GeneratorOptions] = None,
    today: Optional[date] = None,
) -> str:
    options = options or GeneratorOptions()
    limited = list(repositories)[:options.max_repos]

    content = HEADING_TEMPLATE.format(title=options.title)
    if not limited:
        return content + EMPTY_MESSAGE

    renderer = RENDERERS[DisplayFormat.parse(options.format)]
    content += renderer(limited, options)
    content += FOOTER_TEMPLATE.format(date=format_updated_date(today or date.today()))
    return content
