"""Extract live score lines from the results page markup (BeautifulSoup)."""

from typing import Callable

from bs4 import BeautifulSoup, Tag

from ..models.score import UNKNOWN_PLAYER, MatchRow, ScoreLine

Predicate = Callable[[Tag], bool]

LIVE_CONTAINER_CLASS = "livecontainer"
DATA_ROW_CLASS = "gradeA"
PLAYER_CLASS = "player"
HEAD_TO_HEAD_CLASS = "h2h"
FIRST_SCORE_CLASS = "first-score"
LAST_SCORE_CLASS = "last-score"


# Small selector grammar over class membership and tag name


def has_class(name: str) -> Predicate:
    return lambda tag: name in (tag.get("class") or [])


def has_tag(name: str) -> Predicate:
    return lambda tag: tag.name == name


def all_of(*predicates: Predicate) -> Predicate:
    return lambda tag: all(p(tag) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda tag: any(p(tag) for p in predicates)


def not_(predicate: Predicate) -> Predicate:
    return lambda tag: not predicate(tag)


def find_first(node: Tag, predicate: Predicate) -> Tag | None:
    """First descendant of ``node`` matching ``predicate`` in document order"""
    return node.find(predicate)


def find_all(node: Tag, predicate: Predicate) -> list[Tag]:
    """All descendants of ``node`` matching ``predicate`` in document order"""
    return node.find_all(predicate)


IS_LIVE_CONTAINER = has_class(LIVE_CONTAINER_CLASS)
IS_DATA_ROW = has_class(DATA_ROW_CLASS)
IS_PLAYER_CELL = all_of(
    has_class(PLAYER_CLASS), not_(has_class(HEAD_TO_HEAD_CLASS)), has_tag("td")
)
IS_SCORE_CELL = any_of(has_class(FIRST_SCORE_CLASS), has_class(LAST_SCORE_CLASS))
IS_LINK = has_tag("a")


def extract_player_name(player_cell: Tag) -> str:
    link = find_first(player_cell, IS_LINK)
    if link is None:
        return UNKNOWN_PLAYER
    return link.get_text().strip()


def parse_match_row(row: Tag) -> MatchRow | None:
    """Build a MatchRow from one data row, or None if it is not a two-player match row"""
    players = find_all(row, IS_PLAYER_CELL)
    scores = [cell.get_text().strip() for cell in find_all(row, IS_SCORE_CELL)]

    # Heading rows and other non-match rows share the data row class
    if len(players) != 2 or len(scores) != 2:
        return None

    return MatchRow(
        player1=extract_player_name(players[0]),
        score1=scores[0],
        score2=scores[1],
        player2=extract_player_name(players[1]),
    )


def extract_score_lines(document: str | Tag) -> list[ScoreLine] | None:
    """Return score lines in page order, or None when the live container is missing.

    ``document`` may be raw HTML or an already parsed tree.
    """
    if isinstance(document, str):
        document = BeautifulSoup(document, "html.parser")

    live_container = find_first(document, IS_LIVE_CONTAINER)
    if live_container is None:
        return None

    score_lines: list[ScoreLine] = []
    for row in find_all(live_container, IS_DATA_ROW):
        match_row = parse_match_row(row)
        if match_row is not None:
            score_lines.append(match_row.score_line)
    return score_lines
