"""
Text splicing of PresentationRecords into the front-end `movies.js` file.

The target is never parsed as JavaScript. Two regexes locate the
`export const movies = [...]` array and count the existing entries; new
entries are rendered as object literals and inserted after the last one.
"""

import re
from collections import Counter
from typing import Iterable, Optional

from cinemax_pipeline.features.dataset_schema import PresentationRecord

MOVIES_ARRAY_PATTERN = re.compile(r"export const movies = \[([\s\S]*?)\];")
EXISTING_ID_PATTERN = re.compile(r'id: "\d+"')
# array close: `];` at the start of a line, never inside a one-line string
ARRAY_CLOSE_PATTERN = re.compile(r"\n\];")


class ArraySpliceError(ValueError):
    """The target file has no movies array that new entries can be appended to."""


def find_movies_array(content: str) -> Optional[re.Match]:
    return MOVIES_ARRAY_PATTERN.search(content)


def count_existing_ids(content: str) -> int:
    # approximate: counts every `id: "<digits>"`, duplicates included
    return len(EXISTING_ID_PATTERN.findall(content))


def escape_js_string(text: str, collapse_newlines: bool = False) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    if collapse_newlines:
        escaped = escaped.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return escaped


def _js_number(value) -> str:
    # JS prints 7.0 as 7
    return f"{value:g}" if isinstance(value, float) else str(value)


def render_record_literal(record: PresentationRecord) -> str:
    """Render one movie as an element of the `movies` array literal."""
    genres = ", ".join(f'"{escape_js_string(g)}"' for g in record.genres)
    companies = ", ".join(f'"{escape_js_string(c)}"' for c in record.production_companies)
    cast = ",\n".join(
        f'      {{ name: "{m.name}", character: "{m.character}", image: "{m.image}" }}'
        for m in record.cast
    )
    ratings = ", ".join(
        f"{{ stars: {r.stars}, percentage: {r.percentage} }}" for r in record.rating_distribution
    )
    return (
        "  {\n"
        f'    id: "{record.id}",\n'
        f'    title: "{escape_js_string(record.title)}",\n'
        f"    releaseYear: {record.release_year},\n"
        f'    releaseDate: "{record.release_date}",\n'
        f"    runtime: {record.runtime},\n"
        f'    certification: "{record.certification}",\n'
        f'    language: "{record.language}",\n'
        f'    budget: "{record.budget}",\n'
        f'    boxOffice: "{record.box_office}",\n'
        f"    genres: [{genres}],\n"
        f"    averageRating: {_js_number(record.average_rating)},\n"
        f"    totalRatings: {record.total_ratings},\n"
        f"    popularity: {record.popularity},\n"
        f'    posterImage: "{record.poster_image}",\n'
        f'    backdropImage: "{record.backdrop_image}",\n'
        f'    synopsis: "{escape_js_string(record.synopsis, collapse_newlines=True)}",\n'
        f'    director: {{ name: "{record.director.name}", image: "{record.director.image}" }},\n'
        "    cast: [\n"
        f"{cast}\n"
        "    ],\n"
        f"    productionCompanies: [{companies}],\n"
        f"    ratingDistribution: [{ratings}],\n"
        f'    source: "{record.source}"\n'
        "  }"
    )


def splice_records(content: str, literals: list[str]) -> str:
    """
    Insert rendered literals at the end of the movies array.

    The array ends at the first line starting with `];`, and the last existing
    entry must close with `}` right before it (a trailing comma is tolerated).
    Raises ArraySpliceError otherwise, content untouched.
    """
    match = find_movies_array(content)
    if match is None:
        raise ArraySpliceError("Could not find existing movies array")

    body_start = match.start(1)
    close = ARRAY_CLOSE_PATTERN.search(content, body_start)
    if close is None or "\nexport " in content[body_start:close.start()]:
        raise ArraySpliceError("Movies array has no closing line")
    body_end = close.start()
    last_brace = content.rfind("}", body_start, body_end)
    if last_brace == -1 or content[last_brace + 1:body_end].strip() not in ("", ","):
        raise ArraySpliceError("Movies array has no closing entry to append after")

    if not literals:
        return content

    return content[:last_brace + 1] + ",\n" + ",\n".join(literals) + content[body_end:]


def summarize_genres(records: Iterable[PresentationRecord]) -> list[tuple[str, int]]:
    """Counts per synthesized genre, most frequent first."""
    counts = Counter(genre for record in records for genre in record.genres)
    return counts.most_common()
