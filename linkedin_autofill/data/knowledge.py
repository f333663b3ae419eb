"""Knowledge tables - curated answers, duration questions, technology lexicon, applicant profile

All tables are read-only inputs to the resolver. On disk they are JSON files in
the knowledge directory:

    questions.json           [{"question": "...", "answer": ...}, ...]
    duration_questions.json  [{"question": "...", "answer": ...}, ...]
    keywords.json            {"tech": {"Python": ["python", "py"], ...}}
    profile.json             {"phone": "...", "email": "...", "experience_years": {...}, ...}
"""

import json
import os
from dataclasses import dataclass, field
from typing import Dict, List


class KnowledgeError(Exception):
    """A knowledge file exists but does not have the expected shape."""


@dataclass
class KnowledgeEntry:
    question: str
    answer: object = None


@dataclass
class KnowledgeTables:
    questions: List[KnowledgeEntry] = field(default_factory=list)
    duration_questions: List[KnowledgeEntry] = field(default_factory=list)
    # canonical technology name -> surface aliases, iteration order is priority order
    tech_keywords: Dict[str, List[str]] = field(default_factory=dict)


def _read_json(path, default):
    if not os.path.exists(path):
        print(f"  ⚠️ Knowledge file not found, using empty table: {path}")
        return default
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise KnowledgeError(f"{path}: invalid JSON ({e})") from e


def _entries(path, raw):
    if not isinstance(raw, list):
        raise KnowledgeError(f"{path}: expected a list of question records")

    entries = []
    for i, record in enumerate(raw):
        if not isinstance(record, dict) or "question" not in record:
            raise KnowledgeError(f"{path}: record {i} has no 'question'")
        entries.append(KnowledgeEntry(question=str(record["question"]), answer=record.get("answer")))
    return entries


def _tech_keywords(path, raw):
    tech = raw.get("tech", {}) if isinstance(raw, dict) else None
    if not isinstance(tech, dict):
        raise KnowledgeError(f"{path}: expected {{'tech': {{name: [aliases]}}}}")
    return {name: [str(alias).lower() for alias in aliases] for name, aliases in tech.items()}


def load_knowledge(knowledge_dir):
    """Load the curated, duration and lexicon tables from `knowledge_dir`."""
    questions_path = os.path.join(knowledge_dir, "questions.json")
    duration_path = os.path.join(knowledge_dir, "duration_questions.json")
    keywords_path = os.path.join(knowledge_dir, "keywords.json")

    tables = KnowledgeTables(
        questions=_entries(questions_path, _read_json(questions_path, [])),
        duration_questions=_entries(duration_path, _read_json(duration_path, [])),
        tech_keywords=_tech_keywords(keywords_path, _read_json(keywords_path, {"tech": {}})),
    )
    print(
        f"✓ Knowledge loaded: {len(tables.questions)} curated, "
        f"{len(tables.duration_questions)} duration, {len(tables.tech_keywords)} technologies"
    )
    return tables


def load_profile(path) -> dict:
    """Load the applicant profile fact sheet."""
    profile = _read_json(path, {})
    if not isinstance(profile, dict):
        raise KnowledgeError(f"{path}: expected an object of profile fields")
    return profile
