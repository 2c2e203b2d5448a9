"""layout_checker.core: foundation layer.

Contains diagnostic types, colour utilities, configuration, the browser
collaborator layer and the report builder.
This module has NO dependencies on layout_checker.checks or layout_checker.registry.
"""
