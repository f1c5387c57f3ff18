"""Tests for the showcase renderer."""

from __future__ import annotations

from dataclasses import replace
from datetime import date

from showcase_updater.models import DisplayFormat, GeneratorOptions, Repository
from showcase_updater.views.markdown_view import (
    build_card_query,
    encode_uri_component,
    escape_html,
    format_updated_date,
    render_showcase,
    truncate_description,
)

TODAY = date(2024, 1, 5)


def test_card_format_is_default(sample_repositories) -> None:
    result = render_showcase(sample_repositories, GeneratorOptions(title="Test Projects"), today=TODAY)

    assert result.startswith("## Test Projects\n\n")
    assert '<div style="display: flex; flex-wrap: wrap; justify-content: left; gap: 4px">' in result
    assert "github-readme-stats.vercel.app/api/pin/?username=user&repo=awesome-project" in result
    assert "repo=cool-app" in result
    assert result.endswith("\n---\n*Updated on January 5, 2024*\n\n")


def test_unknown_format_falls_back_to_cards(sample_repositories) -> None:
    assert DisplayFormat.parse("grid") is DisplayFormat.CARD
    assert DisplayFormat.parse(None) is DisplayFormat.CARD
    assert DisplayFormat.parse("table") is DisplayFormat.TABLE
    assert DisplayFormat.parse("TABLE") is DisplayFormat.CARD
    assert DisplayFormat.parse("List") is DisplayFormat.CARD

    options = GeneratorOptions(format=DisplayFormat.parse("grid"))
    assert "github-readme-stats.vercel.app" in render_showcase(sample_repositories, options, today=TODAY)


def test_default_title_is_used() -> None:
    repo = Repository(name="x", full_name="u/x", html_url="https://github.com/u/x", updated_at="2024-01-01T00:00:00Z")
    assert render_showcase([repo], today=TODAY).startswith("## 🚀 My Projects\n\n")


def test_list_format_renders_heading_badges_and_description(sample_repositories) -> None:
    options = GeneratorOptions(format=DisplayFormat.LIST)

    result = render_showcase(sample_repositories, options, today=TODAY)

    assert "- ### 🧑‍💻 **[awesome-project](https://github.com/user/awesome-project)**\n" in result
    assert (
        "   ![TypeScript](https://img.shields.io/badge/-TypeScript-blue) "
        "![Stars](https://img.shields.io/badge/⭐-42-yellow)\n"
    ) in result
    assert "![Forks]" not in result
    assert "   An awesome project that does amazing things\t" in result
    assert "   [Visit Website](https://cool-app.example.com)\n" in result


def test_list_format_skips_missing_language_and_disabled_description(sample_repositories) -> None:
    repos = [replace(sample_repositories[0], language=None)]
    options = GeneratorOptions(format=DisplayFormat.LIST, show_description=False, show_forks=True)

    result = render_showcase(repos, options, today=TODAY)

    assert "![TypeScript]" not in result
    assert "![Forks](https://img.shields.io/badge/🔀-5-orange)" in result
    assert "An awesome project" not in result


def test_list_format_encodes_language_badge() -> None:
    repo = Repository(
        name="sharp",
        full_name="u/sharp",
        html_url="https://github.com/u/sharp",
        language="C#",
        updated_at="2024-01-01T00:00:00Z",
    )

    result = render_showcase([repo], GeneratorOptions(format=DisplayFormat.LIST), today=TODAY)

    assert "![C#](https://img.shields.io/badge/-C%23-blue)" in result


def test_table_format_renders_all_enabled_columns(sample_repositories) -> None:
    options = GeneratorOptions(format=DisplayFormat.TABLE, show_forks=True, show_topics=True)

    result = render_showcase(sample_repositories, options, today=TODAY)

    for header in ("Repository", "Description", "Language", "Stars", "Forks", "Topics"):
        assert f"<th>{header}</th>" in result
    assert (
        '<a href="https://github.com/user/awesome-project" target="_blank"><strong>awesome-project</strong></a>'
    ) in result
    assert "https://img.shields.io/badge/-TypeScript-blue?style=flat-square" in result
    assert "⭐ 42" in result and "⭐ 123" in result
    assert "🔀 5" in result and "🔀 8" in result
    assert "background-color: #f1f8ff" in result
    assert '<a href="https://cool-app.example.com" target="_blank"><strong>Live Website</strong></a>' in result
    assert "..." not in result


def test_table_format_omits_disabled_columns(sample_repositories) -> None:
    options = GeneratorOptions(format=DisplayFormat.TABLE, show_language=False, show_stars=False)

    result = render_showcase(sample_repositories, options, today=TODAY)

    assert "<th>Repository</th>" in result
    assert "<th>Description</th>" in result
    for header in ("Language", "Stars", "Forks", "Topics"):
        assert f"<th>{header}</th>" not in result


def test_table_format_respects_max_repos(sample_repositories) -> None:
    options = GeneratorOptions(format=DisplayFormat.TABLE, max_repos=1)

    result = render_showcase(sample_repositories, options, today=TODAY)

    assert "awesome-project" in result
    assert "https://github.com/user/awesome-project" in result
    assert "cool-app" not in result


def test_table_truncates_long_descriptions(sample_repositories) -> None:
    long_repo = replace(sample_repositories[0], description="a" * 200)

    result = render_showcase([long_repo], GeneratorOptions(format=DisplayFormat.TABLE), today=TODAY)

    assert f"<td>{'a' * 150}... </td>" in result
    assert "a" * 151 not in result


def test_truncate_description_boundary() -> None:
    assert truncate_description("b" * 150) == "b" * 150
    assert truncate_description("b" * 151) == "b" * 150 + "..."
    assert len(truncate_description("c" * 200)) == 153


def test_table_escapes_description(sample_repositories) -> None:
    repo = replace(sample_repositories[0], description='<script>alert("x")</script> & more')

    result = render_showcase([repo], GeneratorOptions(format=DisplayFormat.TABLE), today=TODAY)

    assert "<script>" not in result
    assert '"x"' not in result
    assert " & more" not in result
    assert "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt; &amp; more" in result


def test_table_placeholders_for_missing_fields(sample_repositories) -> None:
    repo = replace(sample_repositories[0], description=None, language=None, topics=())
    options = GeneratorOptions(format=DisplayFormat.TABLE, show_topics=True)

    result = render_showcase([repo], options, today=TODAY)

    assert "<td>No description </td>" in result
    assert "None%20Detected" in result
    assert "<td>None</td>" in result


def test_table_shows_at_most_three_topics(sample_repositories) -> None:
    repo = replace(sample_repositories[0], topics=("one", "two", "three", "four"))
    options = GeneratorOptions(format=DisplayFormat.TABLE, show_topics=True)

    result = render_showcase([repo], options, today=TODAY)

    assert ">three</span>" in result
    assert "four" not in result


def test_card_query_reflects_flags(sample_repositories) -> None:
    options = GeneratorOptions(show_description=False, show_language=False, show_stars=False, show_topics=True)

    query = build_card_query(sample_repositories[0], options)

    assert query == (
        "username=user&repo=awesome-project&theme=default&show_owner=true"
        "&description_lines_count=0&hide=description&hide_language=true&show_icons=true"
        "&show_stars=false&show_forks=false&show_topics=true"
    )


def test_card_query_with_defaults(sample_repositories) -> None:
    query = build_card_query(sample_repositories[0], GeneratorOptions())

    assert "description_lines_count=2&hide=&hide_language=false" in query
    assert "show_stars=true" in query


def test_card_owner_defaults_to_empty() -> None:
    repo = Repository(name="solo", full_name="", html_url="https://github.com/x/solo", updated_at="2024-01-01T00:00:00Z")

    assert build_card_query(repo, GeneratorOptions()).startswith("username=&repo=solo")


def test_cards_insert_blank_line_after_every_second_card(sample_repositories) -> None:
    repos = sample_repositories + [replace(sample_repositories[0], name="third", html_url="https://github.com/user/third")]

    result = render_showcase(repos, GeneratorOptions(), today=TODAY)

    assert '</a>\n\n<a href="https://github.com/user/cool-app">' in result
    assert '</a>\n\n<a href="https://github.com/user/third">' in result
    assert result.count("<a href=") == 3


def test_empty_repositories_render_message_only() -> None:
    result = render_showcase([], GeneratorOptions(title="Nothing"), today=TODAY)

    assert result == "## Nothing\n\nNo projects found.\n\n"


def test_render_does_not_mutate_input(sample_repositories) -> None:
    repos = list(sample_repositories)
    render_showcase(repos, GeneratorOptions(max_repos=1), today=TODAY)

    assert repos == sample_repositories


def test_escape_html_replaces_each_character_once() -> None:
    assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#039;"
    assert escape_html("&amp;") == "&amp;amp;"


def test_encode_uri_component_matches_javascript() -> None:
    assert encode_uri_component("Jupyter Notebook") == "Jupyter%20Notebook"
    assert encode_uri_component("C++") == "C%2B%2B"
    assert encode_uri_component("Objective-C") == "Objective-C"


def test_differently_cased_format_renders_cards(sample_repositories) -> None:
    for raw in ("Table", "LIST"):
        result = render_showcase(sample_repositories, GeneratorOptions(format=DisplayFormat.parse(raw)), today=TODAY)

        assert "<table>" not in result
        assert "- ### " not in result
        assert "github-readme-stats.vercel.app" in result


def test_format_updated_date_uses_english_month_names() -> None:
    assert format_updated_date(date(2024, 1, 5)) == "January 5, 2024"
    assert format_updated_date(date(2023, 12, 31)) == "December 31, 2023"
    assert format_updated_date(date(2025, 6, 9)) == "June 9, 2025"


def test_table_language_badge_alt_for_missing_language(sample_repositories) -> None:
    repo = replace(sample_repositories[0], language=None)

    result = render_showcase([repo], GeneratorOptions(format=DisplayFormat.TABLE), today=TODAY)

    assert (
        '<img src="https://img.shields.io/badge/-None%20Detected-blue?style=flat-square" alt="None Detected"/>'
    ) in result
