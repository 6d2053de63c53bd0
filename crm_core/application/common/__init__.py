"""Building blocks shared by every handler.

Import from the submodules directly (entity_handler, repository_registry);
the mapper depends on repository_registry and entity_handler on the mapper.
"""
