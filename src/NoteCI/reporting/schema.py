# ============================================================================
# NoteCI - Report Schema
#
# Purpose: Pydantic model for CI status reports stored as git notes, plus the
#          well-known constants shared with the surrounding tooling
# Inputs: None (schema definitions)
# Outputs: Type-safe, immutable report model
# Dependencies: pydantic
# Usage: report = Report(timestamp="1760000000", status=STATUS_SUCCESS)
#
# Changelog:
#   2026-10-02: Initial schema (timestamp, url, status, agent, v)
#   2026-10-06: Strict field types; JSON null treated as a missing field
#   2026-10-09: Added is_success / is_failure helpers
#   2026-10-18: Case-insensitive note keys
# ============================================================================

from typing import Any, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

# git-notes ref that is expected to contain CI reports
REF = "refs/notes/devtools/ci"

STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"

# Empty status means the run has not reported an outcome yet
RECOGNIZED_STATUSES: FrozenSet[str] = frozenset({"", STATUS_SUCCESS, STATUS_FAILURE})

# Latest version of the report format supported by this package
FORMAT_VERSION = 0

# JSON keys of a note
_NOTE_KEYS: FrozenSet[str] = frozenset({"timestamp", "url", "status", "agent", "v"})


class Report(BaseModel):
    """
    Build/test status report generated by a continuous integration tool.

    Every field is optional; missing fields (and explicit JSON nulls) take
    their zero value. The format version is serialized under the ``v`` key.
    Field values are not checked here; see ``reporting.validation``.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "timestamp": "1760000000",
                "url": "https://ci.example.com/builds/1234",
                "status": "success",
                "agent": "example-ci",
                "v": 0,
            }
        },
    )

    timestamp: str = Field(default="", description="Integer timestamp encoded as a string (seconds).")
    url: str = Field(default="", description="Link to build logs or details.")
    status: str = Field(default="", description="One of '', 'success', 'failure' for recognized reports.")
    agent: str = Field(default="", description="Free-form identifier of the producing CI tool.")
    version: int = Field(default=0, alias="v", description="Version of the metadata format.")

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        # Note keys match case-insensitively ("Status" fills status); an exact key wins over a folded one
        if not isinstance(data, dict):
            return data
        folded: Dict[Any, Any] = {}
        for key, value in data.items():
            name = key.casefold() if isinstance(key, str) else key
            if key not in _NOTE_KEYS and name in _NOTE_KEYS:
                folded.setdefault(name, value)
            else:
                folded[key] = value
        return folded

    @field_validator("timestamp", "url", "status", "agent", "version", mode="before")
    @classmethod
    def _null_as_missing(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status == STATUS_FAILURE
