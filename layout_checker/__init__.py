"""layout-checker: layout regression checks for rendered web pages."""
