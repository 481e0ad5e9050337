"""Options dataclass for the add command."""

from dataclasses import dataclass

CURRENT_PROJECT = "."


@dataclass
class AddOpts:
    """All options for the add command."""

    script_name: str
    project_name: str | None = None

    @property
    def effective_project_name(self):
        return self.project_name or CURRENT_PROJECT
