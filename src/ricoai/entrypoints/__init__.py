"""Entry points for RICOAI (command-line interface)."""
