"""Pattern demonstrations, one module per pattern."""
