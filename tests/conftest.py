"""Test configuration and fixtures."""

import logfire

# Keep test output quiet; spans are still created
logfire.configure(send_to_logfire=False, console=False)
