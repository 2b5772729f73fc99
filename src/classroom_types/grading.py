from enum import Enum
from typing import Annotated, List, Optional

from pydantic import Field, PlainSerializer

from classroom_types.base import ClassroomModel

# Category weights are fixed point with four implied decimals: 123400 == 12.34 %
WEIGHT_SCALE = 10_000
FULL_WEIGHT = 100 * WEIGHT_SCALE

# Integer carried as a JSON string on the wire; numbers are accepted on input
IntString = Annotated[int, PlainSerializer(str, return_type=str, when_used="json")]


class CalculationType(str, Enum):
    """Possible methods of overall grade calculation."""
    CALCULATION_TYPE_UNSPECIFIED = "CALCULATION_TYPE_UNSPECIFIED"
    TOTAL_POINTS = "TOTAL_POINTS"
    WEIGHTED_CATEGORIES = "WEIGHTED_CATEGORIES"


class DisplaySetting(str, Enum):
    """Who can see the overall grade."""
    DISPLAY_SETTING_UNSPECIFIED = "DISPLAY_SETTING_UNSPECIFIED"
    SHOW_OVERALL_GRADE = "SHOW_OVERALL_GRADE"
    HIDE_OVERALL_GRADE = "HIDE_OVERALL_GRADE"
    SHOW_TEACHERS_ONLY = "SHOW_TEACHERS_ONLY"


class GradeCategory(ClassroomModel):
    """
    Details for a grade category in a course.

    weight only applies to WEIGHTED_CATEGORIES courses and
    default_grade_denominator only to TOTAL_POINTS courses.
    """
    id: str
    name: str
    weight: Optional[int] = Field(None, ge=0, le=FULL_WEIGHT)
    default_grade_denominator: Optional[IntString] = None

    @property
    def weight_percent(self) -> Optional[float]:
        if self.weight is None:
            return None
        return self.weight / WEIGHT_SCALE

    @staticmethod
    def percent_to_weight(percent: float) -> int:
        """
        Encode a percentage with two decimals of precision.

        The last two digits of the result are always zero.
        """
        return round(percent * 100) * 100


class GradebookSettings(ClassroomModel):
    """How a student's overall grade is calculated and who can see it."""
    calculation_type: CalculationType
    display_setting: DisplaySetting
    grade_categories: List[GradeCategory] = Field(default_factory=list)
