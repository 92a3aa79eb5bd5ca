"""
create-stb test suite
=====================

Test Modules
------------
- test_sanitize.py: Path sanitizer
- test_environment.py: Node.js and git checks
- test_filesystem.py: Directory creation, tree copy, temp cleanup
- test_metadata.py: package.json / serverless.yml rewriting
- test_acquirer.py: Bundled and remote template sources
- test_models.py: Pydantic configuration
- test_generator.py: The scaffolding pipeline
- test_cli.py: Command-line interface

Running Tests
-------------
    pytest
    pytest tests/test_generator.py::TestCreateProject
"""
