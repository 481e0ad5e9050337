"""Process-wide grumpy configuration, built once when the CLI starts."""

from dataclasses import dataclass

# Cargo exports CARGO to its subcommands, so ``cargo grumpy`` reuses the
# cargo binary that launched it.
CARGO_ENV_VAR = "CARGO"
DEFAULT_CARGO = "cargo"


@dataclass(frozen=True)
class GrumpyConfig:
    """Read-only settings shared by every command in one invocation."""

    cargo: str = DEFAULT_CARGO
