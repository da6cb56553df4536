"""JobSense: n8n webhook tools for the JobSense job-search agent."""

__version__ = "0.1.0"
