"""pytest-bdd step definitions, registered as plugins from the root conftest."""
