"""Single-call utilities exposed as CLI subcommands."""
