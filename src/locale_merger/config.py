import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

ROOT_ENV = "LOCALE_MERGER_ROOT"
LANGUAGES_ENV = "LOCALE_MERGER_LANGUAGES"


class MergerConfig(BaseModel):
    """
    Immutable settings for one locale merge run.

    ``languages`` is ordered: output files are written in this order and a
    document is language-rooted only when its first key is one of these codes.
    """

    model_config = ConfigDict(frozen=True)

    root: Path = Path("config/locales")
    languages: tuple[str, ...] = ("en", "ja")
    extension: str = ".yml"

    @field_validator("languages")
    @classmethod
    def languages_must_be_distinct(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        v = tuple(code.strip() for code in v)
        if not v:
            raise ValueError("At least one language code is required")
        if any(not code for code in v):
            raise ValueError("Language codes must not be blank")
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate language codes in {v!r}")
        return v

    @field_validator("extension")
    @classmethod
    def extension_must_start_with_dot(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Extension must look like '.yml', got {v!r}")
        return v

    def output_path(self, lang: str) -> Path:
        return self.root / f"{lang}{self.extension}"

    def output_names(self) -> set[str]:
        return {f"{lang}{self.extension}" for lang in self.languages}

    @classmethod
    def from_env(cls, **overrides) -> "MergerConfig":
        """Build a config from ``LOCALE_MERGER_*`` environment variables; keyword overrides win."""
        values: dict = {}
        if root := os.environ.get(ROOT_ENV):
            values["root"] = Path(root)
        if languages := os.environ.get(LANGUAGES_ENV):
            values["languages"] = tuple(
                code for code in languages.split(",") if code.strip()
            )
        values.update(overrides)
        return cls(**values)
