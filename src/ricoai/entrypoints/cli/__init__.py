"""The ``ricoai`` command-line interface."""
