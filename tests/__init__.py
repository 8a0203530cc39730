"""
This __init__.py file is kept in the root tests directory while other __init__.py files
in the test structure are left out for simplicity.

It makes pytest treat the whole tests/ directory as one package, so test modules with
the same basename in different subdirectories do not collide. Subdirectories work as
namespace packages (PEP 420) and need no __init__.py of their own.
"""
