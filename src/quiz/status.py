"""
Display statuses and badge styles for graded answers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .grading import can_auto_grade, grade_answer
from .models import Answer, AnswerStatus, Question, QuestionStatus


class BadgeEmphasis(str, Enum):
    """Visual emphasis of a status badge."""

    SUCCESS = "success"
    ERROR = "error"
    NEUTRAL = "neutral"
    WARNING = "warning"


@dataclass(frozen=True)
class BadgeStyle:
    """Label and emphasis for a status badge."""

    label: str
    emphasis: BadgeEmphasis


_DISPLAY_STATUS = {
    AnswerStatus.RESPOSTA_CORRETA: QuestionStatus.CORRETA,
    AnswerStatus.RESPOSTA_INCORRETA: QuestionStatus.INCORRETA,
    AnswerStatus.NAO_RESPONDIDO: QuestionStatus.EM_BRANCO,
    AnswerStatus.PENDENTE_AVALIACAO: QuestionStatus.PENDENTE,
}

BADGE_STYLES = {
    QuestionStatus.CORRETA: BadgeStyle("Correta", BadgeEmphasis.SUCCESS),
    QuestionStatus.INCORRETA: BadgeStyle("Incorreta", BadgeEmphasis.ERROR),
    QuestionStatus.EM_BRANCO: BadgeStyle("Em branco", BadgeEmphasis.NEUTRAL),
    QuestionStatus.PENDENTE: BadgeStyle("Pendente", BadgeEmphasis.WARNING),
}

UNCATEGORIZED_BADGE = BadgeStyle("Sem categoria", BadgeEmphasis.NEUTRAL)


def to_display_status(answer_status: AnswerStatus | str | None) -> QuestionStatus:
    """Map a grading status to its display status. Unknown values are blank."""
    try:
        return _DISPLAY_STATUS.get(AnswerStatus(answer_status), QuestionStatus.EM_BRANCO)
    except ValueError:
        return QuestionStatus.EM_BRANCO


def to_badge_style(status: QuestionStatus | str | None) -> BadgeStyle:
    """Badge for a display status; unknown statuses get the uncategorized badge."""
    try:
        return BADGE_STYLES.get(QuestionStatus(status), UNCATEGORIZED_BADGE)
    except ValueError:
        return UNCATEGORIZED_BADGE


def resolve_display_status(question: Question, answer: Answer) -> QuestionStatus:
    """
    Display status for an answer, re-grading stale pending objective answers.

    A stored PENDENTE_AVALIACAO on an auto-gradable question means the
    status was never refreshed, so it is recomputed from the selection.
    """
    if answer.answer_status == AnswerStatus.PENDENTE_AVALIACAO and can_auto_grade(question):
        graded = grade_answer(question, answer.selected_option_ids)
        if graded is not None:
            return to_display_status(graded)

    return to_display_status(answer.answer_status)
