# providers/invocation.py

from axe_sarif_converter.domain.conversion.models import EnvironmentData
from axe_sarif_converter.schemas import Invocation


def get_invocations(environment_data: EnvironmentData) -> tuple[Invocation, ...]:
    """
    Describe the single scan invocation.

    axe reports one timestamp per scan, used as both start and end time.

    Args:
        environment_data (EnvironmentData): The scan context.

    Returns:
        tuple[Invocation, ...]: One successful invocation.
    """
    return (
        Invocation(
            execution_successful=True,
            start_time_utc=environment_data.timestamp,
            end_time_utc=environment_data.timestamp,
        ),
    )
