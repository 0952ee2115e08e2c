"""
Command line entry point.

Runs the release-props task namespace as a standalone program, e.g.:

    release-props show-config --root android
    release-props check-signing --root android --source .
"""

from invoke import Program

from release_props import __version__
from release_props.tasks import namespace

program = Program(namespace=namespace, version=__version__, name='release-props',
                  binary='release-props')
