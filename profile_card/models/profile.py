"""Profile data model with occupation variants and social links."""

import uuid
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Allowed range for the student year stepper
MIN_YEAR = 1
MAX_YEAR = 6


def generate_id() -> str:
    """Generate a unique identifier for profiles and social links."""
    return str(uuid.uuid4())


class OccupationType(str, Enum):
    """Occupation variant tag."""

    STUDENT = "student"
    WORKER = "worker"


class EducationLevel(str, Enum):
    """Education level for student profiles."""

    UNDERGRADUATE = "undergraduate"
    MASTER = "master"
    PHD = "phd"


class StudentDetails(BaseModel):
    """Details that only matter while the profile is a student.

    Attributes:
        education_level: Current education level
        year: Year of study, clamped to [MIN_YEAR, MAX_YEAR] on every write
    """

    model_config = ConfigDict(validate_assignment=True)

    education_level: EducationLevel = EducationLevel.UNDERGRADUATE
    year: int = MIN_YEAR

    @field_validator("year")
    @classmethod
    def clamp_year(cls, v: int) -> int:
        """Clamp year into the stepper range instead of rejecting it."""
        return max(MIN_YEAR, min(MAX_YEAR, v))


class JobDetails(BaseModel):
    """Details that only matter while the profile is a worker."""

    model_config = ConfigDict(validate_assignment=True)

    position: str = ""


class SocialLink(BaseModel):
    """A single social media entry.

    Empty platform/username values are valid intermediate states while the
    user is still typing.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=generate_id, frozen=True)
    platform: str = ""
    username: str = ""


class StudentOccupation(BaseModel):
    """Active occupation variant for students."""

    kind: Literal["student"] = "student"
    details: StudentDetails


class WorkerOccupation(BaseModel):
    """Active occupation variant for workers."""

    kind: Literal["worker"] = "worker"
    details: JobDetails


Occupation = Annotated[
    Union[StudentOccupation, WorkerOccupation], Field(discriminator="kind")
]


class Profile(BaseModel):
    """Personal profile edited by a single form session.

    Both student_details and job_details are always allocated. Only the one
    matching occupation_type is used for display; the other keeps whatever
    the user entered before switching.

    Attributes:
        id: Unique identifier (UUID4, assigned once)
        name: Display name
        email: Contact email (not validated)
        occupation_type: Active occupation variant tag
        student_details: Student variant payload
        job_details: Worker variant payload
        bio: Free-text biography
        social_links: Ordered social entries (insertion order is display order)
        avatar_image: Decoded avatar handle, None until a selection resolves
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    id: str = Field(default_factory=generate_id, frozen=True)
    name: str = ""
    email: str = ""
    occupation_type: OccupationType = OccupationType.STUDENT
    student_details: StudentDetails = Field(default_factory=StudentDetails)
    job_details: JobDetails = Field(default_factory=JobDetails)
    bio: str = ""
    social_links: list[SocialLink] = Field(default_factory=list)
    avatar_image: Optional[Any] = Field(default=None, exclude=True)

    @property
    def occupation(self) -> Union[StudentOccupation, WorkerOccupation]:
        """Return the active occupation variant with its payload."""
        if self.occupation_type == OccupationType.STUDENT:
            return StudentOccupation(details=self.student_details)
        return WorkerOccupation(details=self.job_details)

    def has_avatar(self) -> bool:
        """Check whether an avatar image has been resolved.

        Returns:
            True if avatar_image is set
        """
        return self.avatar_image is not None
