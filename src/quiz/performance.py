"""
Performance aggregation for the teacher review flow.

Turns one student's batch of activity answers and lesson progress into a
single PerformanceSummary:

- per-activity question breakdowns with selected/correct alternatives
- correct and incorrect totals summed across activities
- score averaged over the activities that have one

completion_time, best_result and hardest_topic have no source data yet and
are always None.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger

from config import get_settings

from .grading import is_correct_from_status
from .schemas import ActivityRecord, AnswerRecord, LessonRecord, StudentAnswersBatch


@dataclass
class PerformanceAlternative:
    """An option of a reviewed question."""

    id: str
    text: str
    is_correct: bool
    is_selected: bool


@dataclass
class PerformanceQuestion:
    """Review breakdown of one answered question."""

    id: str
    answer_id: str
    activity_id: str
    title: str
    statement: str
    question_type: str
    is_correct: Optional[bool]
    teacher_feedback: Optional[str] = None
    alternatives: list[PerformanceAlternative] = field(default_factory=list)


@dataclass
class PerformanceActivity:
    id: str
    title: str
    questions: list[PerformanceQuestion] = field(default_factory=list)


@dataclass
class PerformanceLesson:
    id: str
    title: str
    progress: float


@dataclass
class PerformanceSummary:
    """Aggregated results of one student."""

    user_institution_id: str
    user_id: str
    student_name: str
    score: Optional[float]
    correct_answers: int
    incorrect_answers: int
    activities: list[PerformanceActivity] = field(default_factory=list)
    lessons: list[PerformanceLesson] = field(default_factory=list)

    # Reserved; nothing populates these yet
    completion_time: Optional[float] = None
    best_result: Optional[str] = None
    hardest_topic: Optional[str] = None


def question_title(number: int) -> str:
    """Synthesized title for the 1-based question number."""
    return get_settings().quiz_question_title_template.format(number=number)


def convert_answer(answer: AnswerRecord, index: int, activity_id: str) -> PerformanceQuestion:
    """Convert the answer at 0-based ``index`` of an activity."""
    selected = answer.selected_option_ids
    return PerformanceQuestion(
        id=answer.question_id,
        answer_id=answer.id,
        activity_id=activity_id,
        title=question_title(index + 1),
        statement=answer.statement or "",
        question_type=answer.question_type,
        is_correct=is_correct_from_status(answer.answer_status),
        teacher_feedback=answer.teacher_feedback,
        alternatives=[
            PerformanceAlternative(
                id=option.id,
                text=option.option,
                is_correct=option.is_correct,
                is_selected=option.id in selected,
            )
            for option in answer.options
        ],
    )


def convert_activity(activity: ActivityRecord) -> PerformanceActivity:
    return PerformanceActivity(
        id=activity.id,
        title=activity.title,
        questions=[
            convert_answer(answer, i, activity.id)
            for i, answer in enumerate(activity.answers)
        ],
    )


def convert_lesson(lesson: LessonRecord) -> PerformanceLesson:
    return PerformanceLesson(id=lesson.id, title=lesson.title, progress=lesson.progress)


def average_score(scores: list[Optional[float]]) -> Optional[float]:
    """Mean of the non-null scores, or None when there are none."""
    present = [s for s in scores if s is not None]
    if not present:
        return None
    return sum(present) / len(present)


class PerformanceAggregator:
    """
    Builds PerformanceSummary records from reporting batches.

    Stateless; one instance can serve any number of students.
    """

    def summarize(
        self,
        batch: StudentAnswersBatch | Mapping[str, Any],
        student_id: str,
        user_id: str,
        student_name: str,
    ) -> PerformanceSummary:
        """
        Summarize one student's performance.

        Args:
            batch: Parsed batch, or the raw ``data`` mapping of the answers endpoint
            student_id: Institution-scoped student id
            user_id: Platform user id
            student_name: Display name

        Returns:
            PerformanceSummary built from the batch
        """
        if not isinstance(batch, StudentAnswersBatch):
            batch = StudentAnswersBatch.model_validate(batch)

        activities = batch.activities
        summary = PerformanceSummary(
            user_institution_id=student_id,
            user_id=user_id,
            student_name=student_name,
            score=average_score([a.statistics.score for a in activities]),
            correct_answers=sum(a.statistics.correct_answers for a in activities),
            incorrect_answers=sum(a.statistics.incorrect_answers for a in activities),
            activities=[convert_activity(a) for a in activities],
            lessons=[convert_lesson(lesson) for lesson in batch.lessons],
        )

        logger.info(
            f"Summarized {len(activities)} activities / {len(batch.lessons)} lessons "
            f"for student {student_id}: score={summary.score}"
        )
        return summary


def summarize(
    batch: StudentAnswersBatch | Mapping[str, Any],
    student_id: str,
    user_id: str,
    student_name: str,
) -> PerformanceSummary:
    """Module-level shortcut for PerformanceAggregator().summarize()."""
    return PerformanceAggregator().summarize(batch, student_id, user_id, student_name)
