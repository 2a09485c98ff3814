"""Domain Interfaces (Ports):

Defines the contracts (Abstract Base Classes) that infrastructure components
must implement. The facade depends on these interfaces, not on concrete
implementations, so either tier can be replaced at runtime.
"""
