"""Interfaces (application boundary) for RICOAI.

Defines framework-free application contracts: ABCs and small DTOs shared by
adapters and the composition root. Persistence details stay out of this
package.

Dependency rule: this package is independent; do not import from any other
`ricoai.*` modules. It may be imported by `ricoai.adapters` and
`ricoai.bootstrap`.
"""
