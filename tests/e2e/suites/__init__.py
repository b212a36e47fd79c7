"""E2E suites grouped by feature area."""
