import logging
import os
import re

from extensions import db
from millionaire.constants import QUESTION_LEVELS
from millionaire.models import Question

logger = logging.getLogger(__name__)

_LEVEL_RE = re.compile(r"(\d+)")


def level_from_filename(filename: str):
    """
    '3.txt' -> 3, 'level_12.txt' -> 12; None when the name carries no valid level.
    """
    match = _LEVEL_RE.search(os.path.splitext(os.path.basename(filename))[0])
    if not match:
        return None
    level = int(match.group(1))
    return level if level in QUESTION_LEVELS else None


def parse_questions(content: str) -> list:
    """
    Splits a question file into blocks of five lines: the question, the
    correct answer, then three wrong answers. Blocks are separated by blank
    lines; malformed blocks are skipped.
    """
    parsed = []
    for block in re.split(r"\n\s*\n", content.replace("\r\n", "\n")):
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        if not lines:
            continue
        if len(lines) != 5:
            logger.warning("Skipping malformed question block: %r", lines[0][:60])
            continue
        parsed.append({
            "text": lines[0],
            "answer1": lines[1],
            "answer2": lines[2],
            "answer3": lines[3],
            "answer4": lines[4],
        })
    return parsed


def scan_question_folder(folder_path: str) -> list:
    """
    Walks the folder and returns the sorted relative paths of its .txt files.
    """
    txt_files = []

    for root, dirs, files in os.walk(folder_path):
        for f in files:
            if f.lower().endswith(".txt"):
                full = os.path.join(root, f)
                rel = os.path.relpath(full, folder_path)
                txt_files.append(rel.replace("\\", "/"))

    txt_files.sort()
    return txt_files


def import_questions_file(path: str, level: int) -> int:
    with open(path, encoding="utf-8") as f:
        items = parse_questions(f.read())

    for item in items:
        db.session.add(Question(level=level, **item))
    return len(items)


def import_question_folder(folder_path: str) -> dict:
    """Loads every level file of a folder and returns {level: questions added}."""
    imported = {}
    for rel in scan_question_folder(folder_path):
        level = level_from_filename(rel)
        if level is None:
            logger.warning("Cannot tell the level of %s, skipped", rel)
            continue
        added = import_questions_file(os.path.join(folder_path, rel), level)
        imported[level] = imported.get(level, 0) + added

    db.session.commit()
    logger.info("Imported questions per level: %s", imported)
    return imported
