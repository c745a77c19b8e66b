"""CRD schema browser: field documentation for CustomResourceDefinition schemas."""
