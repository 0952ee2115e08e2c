"""
Release configuration tasks package.

Modules are collected into the namespace by release_props.tasks.
"""
