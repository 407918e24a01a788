"""Domain modules: models, repository protocols and services."""
