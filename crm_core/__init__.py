"""crm-core: uniform request pipeline for business-data management.

Layers:
- core: Result types, errors, settings, validation rule sets, container
- domain: entities, entity families, ordering policy, protocols
- application: queries, commands, handlers, projections, mapper, dispatcher
- infrastructure: in-memory repositories, structured logging
"""

__version__ = "0.1.0"
