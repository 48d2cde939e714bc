"""Task and stage step definitions."""

from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompileStep(BaseModel):
    """SCSS -> CSS compilation options."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Literal["compile"] = "compile"
    use: List[str] = Field(default_factory=list)
    compress: bool = False
    include_css: bool = Field(default=False, alias="include css")
    include_paths: List[str] = Field(default_factory=list)


class MinifyStep(BaseModel):
    """CSS minification options.

    ``keepSpecialComments`` follows the clean-css convention: 0 strips every
    ``/*! ... */`` comment, 1 keeps the first one, 2 (or ``"*"``) keeps all.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Literal["minify"] = "minify"
    keep_special_comments: Literal[0, 1, 2] = Field(
        default=0, alias="keepSpecialComments"
    )

    @field_validator("keep_special_comments", mode="before")
    @classmethod
    def star_means_all(cls, v):
        if v == "*":
            return 2
        return v


class ConcatStep(BaseModel):
    """Concatenate every asset into a single named output file."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["concat"] = "concat"
    filename: str
    separator: str = ""


Step = Annotated[
    Union[CompileStep, MinifyStep, ConcatStep], Field(discriminator="type")
]


class Task(BaseModel):
    """Named build task (sources -> stages -> destination)."""

    model_config = ConfigDict(extra="forbid")

    name: str
    sources: List[str] = Field(min_length=1)
    destination: str = "."
    stages: List[Step] = Field(min_length=1)


__all__ = ["CompileStep", "ConcatStep", "MinifyStep", "Step", "Task"]
