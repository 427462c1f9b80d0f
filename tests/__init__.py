"""Test suite for unitsteps.

Test Structure:
- unit/sampling/: Pattern table, list and array samplers, Sampler facade
- unit/config/: Config models and JSON/YAML loading
- unit/utils/: Logging utilities
- conftest.py: Shared fixtures (evaluators, config paths, logging reset)
"""
