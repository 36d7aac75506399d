"""Parsing of skill-list fields from the bulk import feed."""

from __future__ import annotations

import csv

from techgallery.exceptions import SkillImportParseError
from techgallery.schemas.skill import ImportUserSkill
from techgallery.utils.slug import create_slug


def extract_technology_slug(token: str) -> str:
    """
    Extract the canonical technology slug from a feed token.

    The technology name is the text enclosed in ``[`` ``]``; anything around
    the brackets is ignored.

    Args:
        token: Feed token such as ``"Languages [Java] (JVM)"``

    Returns:
        Technology slug (e.g. ``'java'``)

    Raises:
        SkillImportParseError: If the token has no bracketed, non-empty name

    Examples:
        >>> extract_technology_slug("[Ruby on Rails]")
        'ruby-on-rails'
    """
    start = token.find("[")
    end = token.find("]", start + 1)
    if start == -1 or end == -1:
        raise SkillImportParseError(f"Technology name must be enclosed in brackets: '{token}'")

    slug = create_slug(token[start + 1 : end])
    if not slug:
        raise SkillImportParseError(f"Empty technology name: '{token}'")
    return slug


def parse_rating(token: str) -> int:
    """
    Parse the rating that follows a technology token.

    Range checking is left to the skill service.

    Raises:
        SkillImportParseError: If the token is not an integer
    """
    try:
        return int(token.strip())
    except ValueError as e:
        raise SkillImportParseError(f"Skill rating is not an integer: '{token}'") from e


def parse_skill_list(tech_skills: str | list[str]) -> list[tuple[str, int]]:
    """
    Parse a skill-list field into (technology slug, rating) pairs.

    Entries are ``techToken;rating`` pairs separated by semicolons. The field
    may be one string holding every pair or a list of strings that are parsed
    one after another. A trailing semicolon is tolerated.

    Args:
        tech_skills: Skill-list field of an import record

    Returns:
        Pairs in feed order

    Raises:
        SkillImportParseError: On a dangling technology or an unparseable pair

    Examples:
        >>> parse_skill_list("[Java];4;[Go];2")
        [('java', 4), ('go', 2)]
    """
    chunks = [tech_skills] if isinstance(tech_skills, str) else tech_skills

    pairs: list[tuple[str, int]] = []
    for chunk in chunks:
        tokens = [t.strip() for t in chunk.split(";")]
        while tokens and not tokens[-1]:
            tokens.pop()
        if len(tokens) % 2:
            raise SkillImportParseError(f"Technology without rating in skill list: '{chunk}'")
        for i in range(0, len(tokens), 2):
            pairs.append((extract_technology_slug(tokens[i]), parse_rating(tokens[i + 1])))
    return pairs


def read_feed(filepath: str) -> list[ImportUserSkill]:
    """
    Read import records from a CSV feed.

    The feed needs an ``email`` column; the skill list is read from the
    ``skills`` column, which may be absent or empty.

    Args:
        filepath: Path to the CSV file

    Returns:
        Feed records in file order

    Raises:
        SkillImportParseError: If the feed has no ``email`` column or a row has no e-mail
    """
    with open(filepath, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames or "email" not in reader.fieldnames:
            raise SkillImportParseError(f"Feed '{filepath}' has no 'email' column")

        records: list[ImportUserSkill] = []
        for line_no, row in enumerate(reader, start=2):
            email = (row.get("email") or "").strip()
            if not email:
                raise SkillImportParseError(f"Feed '{filepath}' line {line_no} has no e-mail")
            records.append(ImportUserSkill(email=email, tech_skills=row.get("skills") or ""))
        return records
