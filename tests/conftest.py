"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.quiz.models import KnowledgeMatrixEntry, Option, Question, QuestionType, Quiz


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    from loguru import logger

    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def alternativa_question():
    """Single-choice question with opt3 correct."""
    return Question(
        id="q1",
        statement="What is the default subnet mask for a Class C network?",
        question_type=QuestionType.ALTERNATIVA,
        options=[
            Option("opt1", "255.0.0.0"),
            Option("opt2", "255.255.0.0"),
            Option("opt3", "255.255.255.0"),
            Option("opt4", "255.255.255.255"),
        ],
        correct_option_ids=frozenset({"opt3"}),
        knowledge_matrix=[KnowledgeMatrixEntry(subject_id="math")],
    )


@pytest.fixture
def multipla_question():
    """Multi-choice question with a and b correct."""
    return Question(
        id="q2",
        statement="Which of these are prime numbers?",
        question_type=QuestionType.MULTIPLA_ESCOLHA,
        options=[Option("a", "2"), Option("b", "3"), Option("c", "4")],
        correct_option_ids=frozenset({"a", "b"}),
        knowledge_matrix=[KnowledgeMatrixEntry(subject_id="math")],
    )


@pytest.fixture
def dissertativa_question():
    """Free-text question; never auto-graded."""
    return Question(
        id="q3",
        statement="Explain photosynthesis.",
        question_type=QuestionType.DISSERTATIVA,
        knowledge_matrix=[KnowledgeMatrixEntry(subject_id="biology")],
    )


@pytest.fixture
def sample_quiz(alternativa_question, multipla_question, dissertativa_question):
    """Three-question quiz across two subjects plus one unclassified question."""
    unclassified = Question(
        id="q4",
        statement="True or false?",
        question_type=QuestionType.VERDADEIRO_FALSO,
        options=[Option("t1", "Statement 1"), Option("t2", "Statement 2")],
        correct_option_ids=frozenset({"t1"}),
    )
    return Quiz(
        id="quiz-001",
        title="Simulado ENEM",
        questions=[alternativa_question, multipla_question, dissertativa_question, unclassified],
    )


def make_answer_record(**overrides):
    """Raw answer record as sent by the reporting API."""
    record = {
        "id": "answer-1",
        "questionId": "question-1",
        "answer": None,
        "selectedOptions": [],
        "answerStatus": "RESPOSTA_CORRETA",
        "statement": "Test question statement",
        "questionType": "ALTERNATIVA",
        "difficultyLevel": "MEDIO",
        "solutionExplanation": None,
        "correctOption": "",
        "options": [],
        "knowledgeMatrix": [],
        "teacherFeedback": None,
        "attachment": None,
        "score": None,
    }
    record.update(overrides)
    return record


def make_statistics(**overrides):
    stats = {
        "totalAnswered": 0,
        "correctAnswers": 0,
        "incorrectAnswers": 0,
        "pendingAnswers": 0,
        "score": None,
        "timeSpent": 0,
    }
    stats.update(overrides)
    return stats


@pytest.fixture
def answer_record_factory():
    return make_answer_record


@pytest.fixture
def statistics_factory():
    return make_statistics
