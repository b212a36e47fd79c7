"""
Test suite for the content app E2E harness.

This package contains:
- e2e/: Browser suites driving the real content app, plus the page objects
  and widget components they use
- ui/: Component tests running the page objects against static markup
- unit/: Tests for the REST helper client, config and shared utilities
"""
