"""buildmeter CLI subcommand implementations."""
