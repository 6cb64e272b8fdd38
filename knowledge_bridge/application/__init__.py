"""Application services and orchestration."""
