"""External adapters for the JobSense webhook tools.

This package contains all external dependencies (httpx, pydantic,
the command line) and provides implementations of the core port
interfaces.

Adapter Organization:

- http/: Outbound webhook delivery (httpx)
- tools/: Agent-callable tools built on the webhook port
- cli/: Command-line invocation of the tools for operators
"""
