"""
Base model configuration for Dev Diary.

All data structures share one Pydantic v2 configuration so they serialize
cleanly through FastAPI responses and Temporal payload conversion.
"""

from pydantic import BaseModel, ConfigDict


class BaseDiaryModel(BaseModel):
    """
    Base model for all Dev Diary data structures.

    Provides consistent validation and JSON serialization that works with
    Temporal's pydantic data converter.
    """

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Use enum values instead of names in serialization
        use_enum_values=True,
        # External APIs return more fields than we model
        extra="ignore",
        # Validate default values
        validate_default=True,
    )
