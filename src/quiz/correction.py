"""
Correction data for the teacher review of one student's activity.

Objective answers are graded automatically (see ``grading``); free-text
answers wait in PENDENTE_AVALIACAO until a teacher records a verdict with
``apply_manual_grade``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from loguru import logger

from .grading import can_auto_grade, is_correct_from_status
from .models import Answer, AnswerStatus, Question, QuestionStatus, QuestionType
from .schemas import ActivityAnswers
from .status import resolve_display_status


class ManualGradeNotAllowed(ValueError):
    """Raised when a manual verdict targets an auto-graded question."""


@dataclass(frozen=True)
class EssayCorrection:
    """Teacher verdict on a free-text answer."""

    is_correct: Optional[bool]
    teacher_feedback: str = ""


@dataclass(frozen=True)
class CorrectionQuestion:
    """One question of the correction view."""

    question: Question
    result: Answer
    question_number: int
    correction: Optional[EssayCorrection] = None

    def display_status(self) -> QuestionStatus:
        return resolve_display_status(self.question, self.result)


@dataclass
class CorrectionData:
    """Everything the correction view shows for one student."""

    student_id: str
    student_name: str
    score: Optional[float]
    correct_count: int
    incorrect_count: int
    blank_count: int
    questions: list[CorrectionQuestion] = field(default_factory=list)
    observation: Optional[str] = None
    attachment: Optional[str] = None


def _is_essay(question: Question) -> bool:
    return question.question_type == QuestionType.DISSERTATIVA


def build_correction_data(
    activity: ActivityAnswers | Mapping[str, Any],
    student_id: str,
    student_name: str,
    observation: Optional[str] = None,
    attachment: Optional[str] = None,
) -> CorrectionData:
    """
    Build the correction view of one student's answers to an activity.

    Args:
        activity: Parsed answers and statistics, or the raw ``data`` mapping
        student_id: Student being corrected
        student_name: Display name
        observation: General teacher observation, if any
        attachment: Attachment URL sent with the correction, if any

    Returns:
        CorrectionData with 1-based question numbers
    """
    if not isinstance(activity, ActivityAnswers):
        activity = ActivityAnswers.model_validate(activity)

    questions = []
    for number, record in enumerate(activity.answers, start=1):
        question = record.to_question()
        result = record.to_answer()
        correction = None
        if _is_essay(question):
            correction = EssayCorrection(
                is_correct=is_correct_from_status(result.answer_status),
                teacher_feedback=result.teacher_feedback or "",
            )
        questions.append(CorrectionQuestion(question, result, number, correction))

    blank_count = sum(
        1 for q in questions if q.result.answer_status == AnswerStatus.NAO_RESPONDIDO
    )
    stats = activity.statistics

    return CorrectionData(
        student_id=student_id,
        student_name=student_name,
        score=stats.score,
        correct_count=stats.correct_answers,
        incorrect_count=stats.incorrect_answers,
        blank_count=blank_count,
        questions=questions,
        observation=observation,
        attachment=attachment,
    )


def apply_manual_grade(
    entry: CorrectionQuestion,
    is_correct: bool,
    teacher_feedback: str = "",
) -> CorrectionQuestion:
    """
    Record a teacher verdict on a question that cannot be auto-graded.

    Returns a new entry; the given one is not modified.

    Raises:
        ManualGradeNotAllowed: If the question is auto-gradable
    """
    if can_auto_grade(entry.question):
        raise ManualGradeNotAllowed(
            f"Question {entry.question.id} is {entry.question.question_type} and graded automatically"
        )

    status = AnswerStatus.RESPOSTA_CORRETA if is_correct else AnswerStatus.RESPOSTA_INCORRETA
    result = replace(entry.result, answer_status=status, teacher_feedback=teacher_feedback)
    logger.info(f"Manual grade for question {entry.question.id}: {status.value}")

    return replace(
        entry,
        result=result,
        correction=EssayCorrection(is_correct=is_correct, teacher_feedback=teacher_feedback),
    )
