"""Input schemas for the webhook tools.

Pydantic models validate the raw tool input coming from the agent
runtime and convert it into core models. Types are strict: a salary
given as ``"5000"`` is rejected rather than coerced.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from jobsense.core.errors import InputValidationError
from jobsense.core.models import SearchCriteria, SearchQuery

ModelT = TypeVar("ModelT", bound=BaseModel)


class WorkflowData(BaseModel):
    """Job search criteria. Unknown fields are passed through untouched."""

    model_config = ConfigDict(extra="allow")

    position: StrictStr | None = Field(
        default=None,
        description='Job position or title to search for (e.g., "Software Engineer", "Marketing Manager")',
    )
    location: StrictStr | None = Field(
        default=None,
        description='Job location or city (e.g., "Tbilisi", "Remote", "Georgia")',
    )
    skills: list[StrictStr] | None = Field(
        default=None,
        description='Required skills or technologies (e.g., ["JavaScript", "React", "Node.js"])',
    )
    experience_level: StrictStr | None = Field(
        default=None,
        description='Experience level (e.g., "Entry Level", "Mid Level", "Senior", "Expert")',
    )
    job_type: StrictStr | None = Field(
        default=None,
        description='Employment type (e.g., "Full-time", "Part-time", "Contract", "Remote")',
    )
    salary_min: StrictInt | StrictFloat | None = Field(
        default=None,
        description="Minimum salary expectation",
    )
    salary_max: StrictInt | StrictFloat | None = Field(
        default=None,
        description="Maximum salary expectation",
    )
    remote: StrictBool | None = Field(
        default=None,
        description="Whether to include remote positions",
    )

    @field_validator(*SearchCriteria.KNOWN_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """A known field may be omitted but never sent as null."""
        if v is None:
            raise ValueError("must be omitted rather than null")
        return v

    def to_criteria(self) -> SearchCriteria:
        known = {
            name: getattr(self, name)
            for name in SearchCriteria.KNOWN_FIELDS
            if name in self.model_fields_set
        }
        return SearchCriteria(**known, extra=dict(self.model_extra or {}))


class WorkflowInput(BaseModel):
    """Input of the structured n8n workflow tool."""

    workflow_data: WorkflowData = Field(
        description=(
            "Job search criteria including position, location, skills, "
            "experience level, job type, and salary range."
        ),
    )
    workflow_name: StrictStr | None = Field(
        default=None,
        description='Optional workflow identifier (default: "job_search")',
    )

    @field_validator("workflow_name", mode="before")
    @classmethod
    def reject_null_name(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("must be omitted rather than null")
        return v


class JobSearchInput(BaseModel):
    """Input of the natural-language job search tool."""

    query: StrictStr = Field(
        description=(
            "A natural language description of the job search. Include position, "
            "location, required skills, experience level, job type (full-time/part-time), "
            "salary expectations, remote preference, and any other relevant criteria. "
            'Example: "Software Engineer in Tbilisi with JavaScript and React skills, '
            'mid-level, full-time, remote preferred"'
        ),
    )

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Reject blank queries without altering the text that is sent."""
        if not v.strip():
            raise ValueError("query must be a non-empty string")
        return v

    def to_query(self) -> SearchQuery:
        return SearchQuery(query=self.query)


def _issues(error: ValidationError) -> list[tuple[str, str]]:
    return [
        (".".join(str(part) for part in issue["loc"]), issue["msg"])
        for issue in error.errors()
    ]


def parse_input(model: type[ModelT], tool_input: Any) -> ModelT:
    """Validate raw tool input against a schema.

    Raises:
        InputValidationError: With one ``path: reason`` entry per issue.
    """
    if not isinstance(tool_input, Mapping):
        raise InputValidationError(
            [("", f"Expected an object, received {type(tool_input).__name__}")]
        )
    try:
        return model.model_validate(dict(tool_input))
    except ValidationError as e:
        raise InputValidationError(_issues(e)) from e
