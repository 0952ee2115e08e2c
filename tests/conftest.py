"""
Root pytest configuration for release-props.
"""

from release_props.build.config.logging import bootstrap_logging

# Auto-bootstrap logging for all tests
bootstrap_logging()
