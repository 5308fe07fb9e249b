"""Source category configuration (agents, skills)."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CategoryConfig(BaseModel):
    """Where a category lives in the toolkit and what its entries look like."""

    model_config = ConfigDict(extra="forbid")

    subdir: str = Field(..., min_length=1, description="Directory under the source root, split by language")
    kind: Literal["file", "directory"] = Field(..., description="Whether entries are files or directories")
    suffix: str | None = Field(default=None, description="Required file name suffix (file categories only)")

    @model_validator(mode="after")
    def _suffix_only_for_files(self) -> "CategoryConfig":
        if self.kind == "directory" and self.suffix is not None:
            raise ValueError("suffix is only valid for file categories")
        return self
