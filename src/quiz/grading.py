"""
Auto-grading for objective question types.

Single-choice, multi-choice and true/false questions are graded by exact set
equality between the selected option ids and the correct option ids. Every
other type (free text, connect-the-dots, fill-in, image) is left for a human
and reported as not gradable.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import AnswerStatus, Question, QuestionType

AUTO_GRADABLE_TYPES = frozenset({
    QuestionType.ALTERNATIVA,
    QuestionType.MULTIPLA_ESCOLHA,
    QuestionType.VERDADEIRO_FALSO,
})


def _coerce_question_type(question_type: QuestionType | str) -> QuestionType | None:
    if isinstance(question_type, QuestionType):
        return question_type
    try:
        return QuestionType(question_type)
    except ValueError:
        return None


def can_auto_grade(question: Question) -> bool:
    """
    Check whether a question can be graded without a human.

    Only the question type decides. An auto-gradable question with no
    options is still auto-gradable.
    """
    return _coerce_question_type(question.question_type) in AUTO_GRADABLE_TYPES


def grade_answer(question: Question, selected_option_ids: Iterable[str]) -> AnswerStatus | None:
    """
    Grade a selection against the question's correct options.

    Args:
        question: Question being answered
        selected_option_ids: Option ids chosen by the student, in any order

    Returns:
        NAO_RESPONDIDO for an empty selection, RESPOSTA_CORRETA when the
        selection equals the correct set, RESPOSTA_INCORRETA otherwise.
        None when the question must be graded by a human.
    """
    if not can_auto_grade(question):
        return None

    selected = frozenset(selected_option_ids)
    if not selected:
        return AnswerStatus.NAO_RESPONDIDO

    # Over-selection on ALTERNATIVA fails here like any other mismatch
    if selected == question.correct_option_ids:
        return AnswerStatus.RESPOSTA_CORRETA
    return AnswerStatus.RESPOSTA_INCORRETA


def is_correct_from_status(answer_status: AnswerStatus | str | None) -> bool | None:
    """True/False for graded answers, None for blank, pending or unknown."""
    if answer_status == AnswerStatus.RESPOSTA_CORRETA:
        return True
    if answer_status == AnswerStatus.RESPOSTA_INCORRETA:
        return False
    return None
