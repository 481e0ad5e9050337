"""Options dataclass for the new command."""

from dataclasses import dataclass

DEFAULT_SCRIPT_NAME = "main.rs"


@dataclass
class NewOpts:
    """All options for the new command."""

    project_name: str
    bin_only: bool = False
    lib_only: bool = False
    script_name: str | None = None

    @property
    def project_type_flag(self):
        return "--bin" if self.bin_only else "--lib"

    @property
    def effective_script_name(self):
        return DEFAULT_SCRIPT_NAME if self.script_name is None else self.script_name
