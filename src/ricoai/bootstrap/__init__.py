"""Bootstrap (composition root) for RICOAI.

Wires concrete adapters to the interfaces the rest of an application uses
and reads configuration. Entry points import this package rather than
reaching into `ricoai.adapters` directly. No business rules live here.
"""

from .bootstrap import AppContainer, bootstrap, build_uow_factory

__all__ = ["AppContainer", "bootstrap", "build_uow_factory"]
