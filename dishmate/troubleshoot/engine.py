"""Troubleshooting flow engine.

Stateless: every call takes the current step id and returns the next
step. Callers that offer "back" navigation keep their own history of
visited steps.
"""

from loguru import logger

from dishmate.core.errors import ReferenceDataError
from dishmate.troubleshoot.models import (
    DiagnosisNode,
    DiagnosisStep,
    QuestionNode,
    SolutionNode,
    TroubleshootSolution,
)
from dishmate.troubleshoot.solutions import SOLUTIONS
from dishmate.troubleshoot.steps import ANSWER_TO_SOLUTION, ROOT_STEP_ID, STEPS, answer_key
from dishmate.types import TroubleshootCategory

UNKNOWN_STEP = DiagnosisNode(id="error", diagnosis="Unknown step")
UNKNOWN_NEXT_STEP = DiagnosisNode(id="error", diagnosis="Unknown next step")
GENERIC_FALLBACK = DiagnosisNode(
    id="generic",
    diagnosis="We couldn't find a specific solution. Try checking the filter and running a cleaning cycle.",
)


def validate_flow_graph() -> None:
    """Check that every node reference and solution id in the flow resolves.

    Raises:
        ReferenceDataError: If an option points at a missing node, an answer
            key names a missing node, or an answer maps to a missing solution
    """
    errors: list[str] = []

    for step in STEPS.values():
        for option in step.options:
            if option.next_step is not None and option.next_step not in STEPS:
                errors.append(f"{step.id}:{option.value} -> missing step '{option.next_step}'")

    for key, solution_id in ANSWER_TO_SOLUTION.items():
        step_id, _, answer = key.partition(":")
        step = STEPS.get(step_id)
        if step is None:
            errors.append(f"{key} -> missing step '{step_id}'")
        elif step.get_option(answer) is None:
            errors.append(f"{key} -> step '{step_id}' has no option '{answer}'")
        if solution_id not in SOLUTIONS:
            errors.append(f"{key} -> missing solution '{solution_id}'")

    for category in TroubleshootCategory:
        if f"{category}_start" not in STEPS:
            errors.append(f"category '{category}' has no start step")

    if errors:
        raise ReferenceDataError(f"Troubleshooting flow is inconsistent: {'; '.join(errors)}")


def get_initial_question() -> QuestionNode:
    return STEPS[ROOT_STEP_ID]


def get_troubleshoot_flow(category: TroubleshootCategory | str) -> QuestionNode:
    """Return the first question for a complaint category, or the root question if unknown."""
    step = STEPS.get(f"{category}_start")
    if step is None:
        logger.info("Unknown troubleshooting category, starting from root", category=category)
        return get_initial_question()
    return step


def process_answer(current_step_id: str, answer: str) -> DiagnosisStep:
    """Advance the flow by one answer.

    An option's explicit ``next_step`` always wins. Otherwise the
    ``(step, answer)`` pair is looked up in the solution map, and anything
    unmapped gets generic advice.

    Args:
        current_step_id: Id of the question being answered
        answer: The chosen option's value

    Returns:
        The next question, a solution, or a diagnosis
    """
    current_step = STEPS.get(current_step_id)
    if current_step is None:
        logger.warning("Unknown troubleshooting step", step_id=current_step_id)
        return UNKNOWN_STEP

    selected = current_step.get_option(answer)
    if selected is not None and selected.next_step:
        next_step = STEPS.get(selected.next_step)
        if next_step is None:
            logger.warning("Unknown next troubleshooting step", step_id=current_step_id, next_step=selected.next_step)
            return UNKNOWN_NEXT_STEP
        logger.debug("Troubleshooting transition", step_id=current_step_id, answer=answer, next_step=next_step.id)
        return next_step

    solution_id = ANSWER_TO_SOLUTION.get(answer_key(current_step_id, answer))
    if solution_id:
        logger.debug("Troubleshooting solution reached", step_id=current_step_id, answer=answer, solution_id=solution_id)
        return SolutionNode(id=solution_id, solution=SOLUTIONS[solution_id])

    logger.info("No troubleshooting solution for answer, using generic advice", step_id=current_step_id, answer=answer)
    return GENERIC_FALLBACK


def get_solution(solution_id: str) -> TroubleshootSolution | None:
    return SOLUTIONS.get(solution_id)


validate_flow_graph()
