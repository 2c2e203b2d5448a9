"""Layout checks, one module each. See layout_checker.registry for discovery."""
