"""
Scoring and matching constants. Thresholds are fixed; change them only with a registry version bump.
"""

from typing import Final

# Likert scale (1-5)
LIKERT_MIN: Final[int] = 1
LIKERT_MAX: Final[int] = 5
LIKERT_NEUTRAL: Final[float] = 3.0
REVERSE_PIVOT: Final[int] = 6  # reversed score = 6 - response

# Vignette expansion
VIGNETTE_SELECTED_RESPONSE: Final[int] = 5
VIGNETTE_UNSELECTED_RESPONSE: Final[int] = 1

# Ipsatized display range
IPSATIZED_DISPLAY_MIN: Final[float] = -2.0
IPSATIZED_DISPLAY_MAX: Final[float] = 2.0

# Axis scale (0-10)
AXIS_MIN: Final[int] = 0
AXIS_MAX: Final[int] = 10
AXIS_NEUTRAL: Final[int] = 5
DEFAULT_SLIDER_POSITIONS: Final[int] = 5

# Swipe scoring
SWIPE_MAX_MAGNITUDE: Final[int] = 2  # |strong_agree|
DEFAULT_SHRINKAGE_K: Final[float] = 4.0
DEFAULT_UNSURE_PENALTY: Final[float] = 0.5
DEFAULT_TOP_DRIVER_COUNT: Final[int] = 5
SLIDER_SWIPE_ITEMS_PER_AXIS: Final[int] = 2
SLIDER_STRONG_THRESHOLD: Final[float] = 0.6
SLIDER_LEAN_THRESHOLD: Final[float] = 0.2

# Profile mutation
DAMPENED_CURRENT_WEIGHT: Final[float] = 0.8
DAMPENED_LEARNED_WEIGHT: Final[float] = 0.2
PROFILE_VERSION: Final[str] = "1.0.0"

# Stance labels
STANCE_STRONG_A_MAX: Final[int] = 2
STANCE_LEAN_A_MAX: Final[int] = 4
STANCE_LEAN_B_MIN: Final[int] = 6
STANCE_STRONG_B_MIN: Final[int] = 8

# Proposition recommendation (axis space)
VOTE_THRESHOLD: Final[float] = 0.15
FACTOR_THRESHOLD: Final[float] = 0.15
CONFIDENCE_MULTIPLIER: Final[float] = 1.2
EXPLANATION_FACTOR_COUNT: Final[int] = 2

# Proposition recommendation (value space)
VALUE_VOTE_THRESHOLD: Final[float] = 0.12
VALUE_BREAKDOWN_THRESHOLD: Final[float] = 0.1
VALUE_CONFIDENCE_MULTIPLIER: Final[float] = 1.5
VALUE_TOP_FACTOR_COUNT: Final[int] = 3

# Candidate matching
ALIGNMENT_STRONG_MAX_DIFF: Final[float] = 1.0
ALIGNMENT_MODERATE_MAX_DIFF: Final[float] = 3.0
ALIGNMENT_WEAK_MAX_DIFF: Final[float] = 5.0
AGREEMENT_MAX_DIFF: Final[float] = 2.0
DISAGREEMENT_MIN_DIFF: Final[float] = 4.0
KEY_POINT_LIMIT: Final[int] = 2
NO_OVERLAP_AVG_DIFF: Final[float] = 5.0
AXIS_BEST_MATCH_FLOOR: Final[int] = 50
VALUE_BEST_MATCH_FLOOR: Final[int] = 55
VALUE_NEUTRAL_MATCH_PERCENT: Final[int] = 50
VALUE_DIFF_SCALE: Final[float] = 5.0  # maps |pref - stance| (0..2) onto the 0..10 distance scale
VALUE_ALIGNED_LIMIT: Final[int] = 3

# Adaptive swipe selection
SELECTION_TARGET_CONFIDENCE: Final[float] = 0.7
SELECTION_COVERAGE_PHASE_END: Final[int] = 10  # questions answered before coverage stops leading
SELECTION_UNCERTAIN_PHASE_END: Final[int] = 20
SELECTION_FEW_ANSWERS: Final[int] = 3
STOP_MIN_ANSWERS_PER_AXIS: Final[int] = 2
MIN_QUESTIONS_FLOOR: Final[int] = 8
MIN_QUESTIONS_PER_DOMAIN: Final[int] = 3
MAX_QUESTIONS_FLOOR: Final[int] = 15
MAX_QUESTIONS_PER_DOMAIN: Final[int] = 6
PROGRESS_EARLY_PER_DOMAIN: Final[int] = 2
PROGRESS_CONFIDENT_EXTRA: Final[int] = 3
PROGRESS_UNCERTAIN_EXTRA: Final[int] = 8
