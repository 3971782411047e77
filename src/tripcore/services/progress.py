"""Step indicators for the three-page scheduling flow."""

from tripcore.errors import ErrorCode, InvalidInputError
from tripcore.models.progress import ProgressStep, StepDefinition, StepId

STEPS: tuple[StepDefinition, ...] = (
    StepDefinition(id=StepId.TIME_SCHEDULE, title="Time schedule", icon="time-outline"),
    StepDefinition(id=StepId.ADDRESSES, title="Addresses", icon="location-outline"),
    StepDefinition(id=StepId.CONFIRMATION, title="Confirmation", icon="checkmark-circle-outline"),
)

_ORDER: dict[StepId, int] = {step.id: index for index, step in enumerate(STEPS)}


def _as_step_id(step: StepId | str) -> StepId:
    try:
        return StepId(step)
    except ValueError as e:
        raise InvalidInputError(f"Unknown step: {step!r}", code=ErrorCode.UNKNOWN_STEP) from e


def get_steps(current_step: StepId | str) -> list[ProgressStep]:
    current = _ORDER[_as_step_id(current_step)]
    return [
        ProgressStep(
            id=step.id,
            title=step.title,
            icon=step.icon,
            is_active=index == current,
            is_completed=index < current,
        )
        for index, step in enumerate(STEPS)
    ]


def next_step(current_step: StepId | str) -> StepId | None:
    """Step after ``current_step``, or None once the flow reaches confirmation."""
    index = _ORDER[_as_step_id(current_step)] + 1
    return STEPS[index].id if index < len(STEPS) else None
