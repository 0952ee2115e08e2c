"""
Build package for release-props.

This package contains configuration loading and the tasks that display and check it.
"""
