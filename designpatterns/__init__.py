"""Runnable examples of creational and behavioural design patterns and SOLID principles."""

__version__ = "0.1.0"

__all__ = [
    "abstract_factory",
    "builder",
    "factory_method",
    "functional_options",
    "object_pool",
    "simple_factory",
    "chain_of_responsibility",
    "template_method",
    "context_pattern",
    "solid_lsp",
    "solid_srp",
]