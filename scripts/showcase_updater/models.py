#------------------------------------------------------------
#                          models.py
#     Defines dataclasses used by the showcase pipeline.

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from .config import (
    DEFAULT_ACTION_TITLE,
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_MAX_REPOS,
    DEFAULT_README_PATH,
    DEFAULT_RENDER_TITLE,
    DEFAULT_TOPIC,
    SHOWCASE_END_MARKER,
    SHOWCASE_START_MARKER,
)

class DisplayFormat(Enum):
    LIST = "list"
    TABLE = "table"
    CARD = "card"

    # This function does map a raw format string onto a display format.
    # Matching is exact; unrecognized or empty values fall back to cards.
    @classmethod
    def parse(cls, value: Optional[str]) -> "DisplayFormat":
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return cls.CARD

@dataclass(frozen=True)
class Repository:
    name: str
    full_name: str
    html_url: str
    updated_at: str
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    topics: Tuple[str, ...] = ()
    homepage: Optional[str] = None

    @property
    def owner(self) -> str:
        return self.full_name.split("/")[0] if self.full_name else ""

@dataclass(frozen=True)
class GeneratorOptions:
    format: DisplayFormat = DisplayFormat.CARD
    title: str = DEFAULT_RENDER_TITLE
    show_description: bool = True
    show_language: bool = True
    show_stars: bool = True
    show_topics: bool = False
    show_forks: bool = False
    max_repos: int = DEFAULT_MAX_REPOS

@dataclass(frozen=True)
class ActionInputs:
    token: str
    username: str
    topic: str = DEFAULT_TOPIC
    format: DisplayFormat = DisplayFormat.CARD
    readme_path: str = DEFAULT_README_PATH
    title: str = DEFAULT_ACTION_TITLE
    max_repos: int = DEFAULT_MAX_REPOS
    show_description: bool = True
    show_language: bool = True
    show_stars: bool = True
    show_forks: bool = True
    show_topics: bool = False
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    start_marker: str = SHOWCASE_START_MARKER
    end_marker: str = SHOWCASE_END_MARKER
    commit_changes: bool = True

    # This function does project the action inputs onto renderer options.
    def generator_options(self) -> GeneratorOptions:
        return GeneratorOptions(
            format=self.format,
            title=self.title,
            show_description=self.show_description,
            show_language=self.show_language,
            show_stars=self.show_stars,
            show_topics=self.show_topics,
            show_forks=self.show_forks,
            max_repos=self.max_repos,
        )
