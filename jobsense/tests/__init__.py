"""Test suite for the JobSense webhook tools.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No network, fast execution

2. adapters/: Tests for adapter implementations
   - httpx adapter against httpx.MockTransport
   - Tools against the fake webhook port

3. fakes/: Port implementations for testing
   - In-memory WebhookPort that records requests
"""
