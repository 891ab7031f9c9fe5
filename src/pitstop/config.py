from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class RunConfig(BaseModel):
    """Options for one command-line run, validated before any module loads."""

    model_config = ConfigDict(extra="forbid")

    modules: list[Path]
    color: bool = True
    strict: bool = False
    verbose: bool = False
    debug_log: Path | None = None

    @field_validator("modules")
    @classmethod
    def modules_must_be_python_files(cls, v: list[Path]) -> list[Path]:
        if not v:
            raise ValueError("at least one test module is required")
        for path in v:
            if not path.is_file():
                raise ValueError(f"test module not found: {path}")
            if path.suffix != ".py":
                raise ValueError(f"test module must be a .py file: {path}")
        return v
