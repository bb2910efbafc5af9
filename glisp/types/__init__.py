"""Data model of the Glisp language: symbols, nil, expression nodes,
environments and callables."""
