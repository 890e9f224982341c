"""
Release configuration: which repository, revision range and fixVersion to audit.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..base import ValidationResult
from ..validators import validate_directory, validate_non_empty, validate_project_key


@dataclass
class ReleaseConfig:
    """The release under audit, as given on the command line.

    Attributes:
        repo_path: Path to the git repository
        project: Jira project key (e.g. "FACT")
        from_rev: Start of the revision range (exclusive)
        to_rev: End of the revision range (inclusive)
        fix_version: Jira fixVersion the release is tracked under
    """

    repo_path: Path
    project: str
    from_rev: str
    to_rev: str
    fix_version: str

    def __post_init__(self):
        self.repo_path = Path(self.repo_path).expanduser()

    @property
    def revision_range(self) -> str:
        """The git revision range, e.g. "2.0.2..HEAD"."""
        return f"{self.from_rev}..{self.to_rev}"

    def validate(self) -> ValidationResult:
        """Validate the release parameters."""
        errors: list[str] = []

        is_valid, error = validate_directory(self.repo_path)
        if not is_valid:
            errors.append(f"repo_path: {error}")

        is_valid, error = validate_project_key(self.project)
        if not is_valid:
            errors.append(f"project: {error}")

        for name in ("from_rev", "to_rev", "fix_version"):
            is_valid, error = validate_non_empty(getattr(self, name), name)
            if not is_valid:
                errors.append(error)

        if errors:
            return ValidationResult.invalid(errors)

        return ValidationResult.valid()

    def to_dict(self) -> dict[str, Any]:
        return {
            "repo_path": str(self.repo_path),
            "project": self.project,
            "from_rev": self.from_rev,
            "to_rev": self.to_rev,
            "fix_version": self.fix_version,
        }
