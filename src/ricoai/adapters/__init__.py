"""Adapters (infrastructure) for RICOAI.

Concrete implementations of the interfaces in `ricoai.interfaces`
(relational and in-memory user image repositories, the unit of work), plus
persistence wiring (engines, metadata, migrations).

Dependency rule: may import `ricoai.interfaces`; interfaces must not import
this package.
"""
