"""Agent-callable tools that forward requests to n8n webhooks.

- n8n_workflow: structured criteria, wrapped result envelope
- job_search: natural-language query, raw upstream result
"""

from .job_search import JobSearchTool
from .n8n_workflow import N8NWorkflowTool

__all__ = ["JobSearchTool", "N8NWorkflowTool"]
