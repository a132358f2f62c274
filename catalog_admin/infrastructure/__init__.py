"""Infrastructure - configuration, logging, product store client, export sinks."""
