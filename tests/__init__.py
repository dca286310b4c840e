"""RICOAI test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : One behavior suite run against every UserImageRepository.
- integration/  : Real databases and migrations (SQLite files, PostgreSQL).
- functional/   : ``ricoai db`` flows driven through click's CliRunner.
- e2e/          : Global CLI options and logging, end to end.
- fixtures/     : Shared pytest fixtures (no tests here).

Markers matching the folder names are applied automatically in conftest.py;
PostgreSQL tests are skipped when Docker is not reachable.
"""
