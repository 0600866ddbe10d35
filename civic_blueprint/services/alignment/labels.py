from civic_blueprint.core.constants import (
    ALIGNMENT_MODERATE_MAX_DIFF,
    ALIGNMENT_STRONG_MAX_DIFF,
    ALIGNMENT_WEAK_MAX_DIFF,
    STANCE_LEAN_A_MAX,
    STANCE_LEAN_B_MIN,
    STANCE_STRONG_A_MAX,
    STANCE_STRONG_B_MIN,
)
from civic_blueprint.models.ballot import MatchStrength


def get_stance_label(value: float, pole_a: str, pole_b: str) -> str:
    """Describe a 0-10 position relative to its two poles."""
    if value <= STANCE_STRONG_A_MAX:
        return f'Strongly toward "{pole_a}"'
    if value <= STANCE_LEAN_A_MAX:
        return f'Lean toward "{pole_a}"'
    if value >= STANCE_STRONG_B_MIN:
        return f'Strongly toward "{pole_b}"'
    if value >= STANCE_LEAN_B_MIN:
        return f'Lean toward "{pole_b}"'
    return "Balanced / Mixed"


def classify_difference(diff: float) -> MatchStrength:
    """Bucket a 0-10 distance between two positions."""
    if diff <= ALIGNMENT_STRONG_MAX_DIFF:
        return "strong"
    if diff <= ALIGNMENT_MODERATE_MAX_DIFF:
        return "moderate"
    if diff <= ALIGNMENT_WEAK_MAX_DIFF:
        return "weak"
    return "opposed"
