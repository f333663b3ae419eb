"""
Unanswered question log

Questions the resolver could not answer are appended to a JSONL curation file,
one entry per distinct normalized question text. A human fills in `answer`
(for choice fields, picking from `options`) and moves the entry into the
curated knowledge table.

Output:
    custom_questions.jsonl - one JSON object per unanswered question
"""

from typing import List, Optional

import linkedin_autofill.config as config
from linkedin_autofill.reasoning.normalize import normalize_label
from linkedin_autofill.reasoning.options import Option, real_options
from linkedin_autofill.utils.logging import append_jsonl, now_iso, read_jsonl


class QuestionLogger:
    def __init__(self, path=None):
        self.path = path or config.QUESTION_LOG_PATH

    def has_question(self, question):
        return any(
            normalize_label(record.get("question", "")) == question
            for record in read_jsonl(self.path)
        )

    def log(self, context, question, answer_type, options: Optional[List[Option]] = None):
        """
        Append an unanswered question unless an entry with the same normalized
        text already exists.

        Args:
            context: job context dict with "job_id"
            question: label text (normalized again here)
            answer_type: "text", "number" or "dropdown"
            options: choice options for dropdown/radio questions; placeholder dropped

        Returns: True if a new entry was written
        """
        question = normalize_label(question)
        if not question:
            return False

        if self.has_question(question):
            print(f"  ⏭️  Already logged: {question}")
            return False

        entry = {
            "job_id": (context or {}).get("job_id", "unknown"),
            "question": question,
            "answer_type": answer_type,
            "answer": None,
            "timestamp": now_iso(),
        }
        if options is not None:
            entry["options"] = [{"text": opt.text, "value": opt.value} for opt in real_options(options)]

        append_jsonl(self.path, entry)
        print(f"  📝 Logged unanswered question: {question}")
        return True
