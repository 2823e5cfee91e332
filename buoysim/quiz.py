"""Короткий тест по плавучести и давлению.

Статическая таблица вопросов и подсчёт баллов; с моделью не связан.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class QuizQuestion:
    id: str
    question: str
    options: Tuple[str, ...]
    correct_answer: int
    explanation: str

    def __post_init__(self) -> None:
        if not (0 <= self.correct_answer < len(self.options)):
            raise ValueError(f"{self.id}: correct_answer out of range")


QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion(
        id="1",
        question="If an object has a density of 0.8 g/cm³, what will happen when placed in water?",
        options=("It will sink", "It will float", "It will remain suspended", "It depends on the volume"),
        correct_answer=1,
        explanation=(
            "Objects with density less than water (1.0 g/cm³) will float because the "
            "buoyant force exceeds their weight."
        ),
    ),
    QuizQuestion(
        id="2",
        question="What happens to pressure as you go deeper in a fluid?",
        options=("It decreases", "It stays the same", "It increases", "It becomes zero"),
        correct_answer=2,
        explanation="Pressure increases with depth according to P = ρgh, where h is the depth.",
    ),
    QuizQuestion(
        id="3",
        question="An object with density equal to water (1.0 g/cm³) will:",
        options=("Float on the surface", "Sink to the bottom", "Remain suspended at any depth", "Bounce up and down"),
        correct_answer=2,
        explanation=(
            "When densities are equal, the buoyant force exactly balances the weight, "
            "so the object remains suspended."
        ),
    ),
    QuizQuestion(
        id="4",
        question="Which force is responsible for objects floating?",
        options=("Gravitational force", "Buoyant force", "Magnetic force", "Friction force"),
        correct_answer=1,
        explanation="Buoyant force, discovered by Archimedes, pushes upward on objects submerged in fluids.",
    ),
)


def score(
    selected: Sequence[Optional[int]],
    questions: Sequence[QuizQuestion] = QUESTIONS,
) -> int:
    """Число совпадений выбранных и правильных индексов (None = без ответа)."""

    if len(selected) != len(questions):
        raise ValueError(f"expected {len(questions)} answers, got {len(selected)}")
    return sum(1 for q, a in zip(questions, selected) if a is not None and a == q.correct_answer)


def verdict(points: int, total: int = len(QUESTIONS)) -> str:
    if total <= 0:
        raise ValueError("total must be > 0")
    if not (0 <= points <= total):
        raise ValueError(f"points must be in [0, {total}], got {points}")

    if points == total:
        return "Perfect! You have mastered buoyancy and pressure concepts!"
    if points >= total * 0.7:
        return "Great job! You have a good understanding of the concepts."
    return "Keep practicing! Try the simulation more to better understand the concepts."
