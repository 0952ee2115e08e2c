"""Task collection for release-props.

Direct task imports, flattened into a single namespace.
"""

from invoke import Collection

from release_props.build.tasks import config_show, properties, signing

namespace = Collection()

for submodule in [config_show, properties, signing]:
    submodule_collection = Collection.from_module(submodule)
    for task_name, task in submodule_collection.tasks.items():
        namespace.add_task(task)

ns = namespace
